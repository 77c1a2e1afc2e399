from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigParam:
    """A named configuration value with an optional compiled-in default.

    An empty ``default`` means the parameter has no default.
    """

    name: str
    default: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ConfigParam name must be non-empty")

    @property
    def has_default(self) -> bool:
        return self.default != ""
