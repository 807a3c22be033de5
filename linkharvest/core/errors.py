from typing import Optional


class HarvestError(Exception):
    """Base class for failures that end a harvesting run."""


class MetadataParseError(HarvestError):
    """The listing's item count marker did not contain a number."""

    def __init__(self, text: Optional[str]):
        self.text = text
        super().__init__(f"Could not parse item count from {text!r}.")


class NoItemsFoundError(HarvestError):
    """The extraction probe matched no anchors."""

    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"Could not find any items matching '{selector}'.")


class GrowthTimeout(HarvestError):
    """Scrolling stopped producing new content before the target was reached."""

    def __init__(self, harvested: int, target: int, timeout_ms: int):
        self.harvested = harvested
        self.target = target
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Page stopped growing after {timeout_ms}ms with {harvested}/{target} items."
        )
