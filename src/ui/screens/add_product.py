# src/ui/screens/add_product.py

"""Product creation form."""

import logging
from typing import Any

from textual import on, work
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.validation import Length, Number
from textual.widgets import Button, Footer, Header, Input, Label, Static

from src.models.load_result import LoadResult
from src.models.product import Product
from src.ui.screens.base import RoutedScreen
from src.ui.widgets import ConfirmationPanel, ErrorPanel

logger = logging.getLogger("product_catalog.ui.add_product")

SUBMIT_LABEL = "Add Product"
SUBMITTING_LABEL = "Submitting..."


class AddProductScreen(RoutedScreen):
    """Title/price form that posts a new product through the route action.

    While a submission is in flight the submit button is disabled and a
    second submit (button or Enter) is ignored. Fields are cleared only
    after a successful create.
    """

    def __init__(self) -> None:
        super().__init__()
        self.submitting: bool = False
        self.created: Product | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Vertical(
            Static("Add Product", classes="screen-title"),
            Label("Title:", classes="field-label"),
            Input(
                placeholder="Product title",
                id="title_input",
                validate_on=["submitted"],
                validators=[
                    Length(
                        minimum=1,
                        failure_description="Title is required",
                    )
                ],
            ),
            Label("Price:", classes="field-label"),
            Input(
                placeholder="Product price",
                type="number",
                id="price_input",
                validate_on=["submitted"],
                validators=[Number(failure_description="Price is required")],
            ),
            Button(SUBMIT_LABEL, variant="primary", id="submit_btn"),
            Vertical(id="submit_feedback"),
            Button("Go to Home", variant="success", id="go_home"),
            id="add_product_container",
            classes="card",
        )
        yield Footer()

    # ── Field access ─────────────────────────────────────

    @property
    def title_input(self) -> Input:
        return self.query_one("#title_input", Input)

    @property
    def price_input(self) -> Input:
        return self.query_one("#price_input", Input)

    @property
    def submit_button(self) -> Button:
        return self.query_one("#submit_btn", Button)

    def form_data(self) -> dict[str, Any]:
        return {
            "title": self.title_input.value,
            "price": self.price_input.value,
        }

    @staticmethod
    def _field_is_valid(field: Input) -> bool:
        outcome = field.validate(field.value)
        return outcome is None or outcome.is_valid

    # ── Submission ───────────────────────────────────────

    @on(Button.Pressed, "#submit_btn")
    def on_submit_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.submit()

    @on(Input.Submitted)
    def on_field_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.submit()

    def submit(self) -> None:
        """Validate the form and start the create request."""
        if self.submitting:
            logger.debug("Submit ignored, a request is already pending")
            return

        invalid = [
            field
            for field in (self.title_input, self.price_input)
            if not self._field_is_valid(field)
        ]
        if invalid:
            invalid[0].focus()
            self.notify(
                "Title and price are required", severity="warning"
            )
            return

        self._set_submitting(True)
        self.run_submission(self.form_data())

    def _set_submitting(self, submitting: bool) -> None:
        self.submitting = submitting
        button = self.submit_button
        button.disabled = submitting
        button.label = SUBMITTING_LABEL if submitting else SUBMIT_LABEL

    @work(exclusive=True, group="action")
    async def run_submission(self, form: dict[str, Any]) -> None:
        """Run the route action and render its outcome."""
        if self.route is None:
            self._set_submitting(False)
            return
        result = await self.catalog_app.run_route_action(self.route, form)
        if not self.is_attached:
            logger.debug("Discarding submission result, form was closed")
            return
        self._set_submitting(False)
        await self.show_result(result)

    async def show_result(self, result: LoadResult) -> None:
        """Show the confirmation (and reset the form) or the error."""
        result.consume()
        feedback = self.query_one("#submit_feedback", Vertical)
        await feedback.remove_children()

        if not result.ok:
            await feedback.mount(
                ErrorPanel(result.reason, id="submit_error")
            )
            self.notify(result.reason, severity="error")
            return

        self.created = result.value
        await feedback.mount(
            ConfirmationPanel(result.value, id="confirmation")
        )
        # Inputs validate only on submit, so clearing leaves them unflagged
        self.title_input.clear()
        self.price_input.clear()
        self.title_input.focus()
