"""Optional animal capabilities.

A capability is a structural contract: any variant implementing the method
satisfies it, with no shared base class and no flag field. Filtering by
capability is an `isinstance` check against the runtime-checkable Protocol.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Flyer(Protocol):
    """Animals that can take off.

    Rules:
    - `fly` is pure and returns the text to display.
    - Variants without flight simply do not define `fly`.
    """

    def fly(self) -> str:
        """Describe the animal taking off."""

        ...
