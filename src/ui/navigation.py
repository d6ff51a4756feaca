# src/ui/navigation.py

"""In-memory navigation state owned by the app."""

from dataclasses import dataclass


@dataclass
class NavigationState:
    """Current path plus a visit counter for stale-result detection.

    Every navigation bumps ``visit``. A screen remembers the visit it was
    mounted for; a loader result is applied only while that visit is
    still current.
    """

    path: str = "/"
    visit: int = 0

    def go(self, path: str) -> int:
        """Record a navigation to *path* and return its visit token."""
        self.path = path
        self.visit += 1
        return self.visit

    def is_current(self, token: int) -> bool:
        """True while no navigation happened since *token* was issued."""
        return token == self.visit
