"""Data model for the outcome of locating a WordPress installation."""

from dataclasses import asdict, dataclass, fields


@dataclass(frozen=True)
class ResolutionResult:
    """Directories resolved for one WordPress installation.

    Either every field holds a non-empty path or every field is None.
    """

    composer_root: str | None = None
    web_root: str | None = None
    vendor_dir: str | None = None
    plugins_dir: str | None = None
    mu_plugins_dir: str | None = None
    themes_dir: str | None = None
    dropins_dir: str | None = None

    @classmethod
    def unresolved(cls) -> "ResolutionResult":
        """Return the result reported when no root was found."""
        return cls()

    @property
    def is_resolved(self) -> bool:
        """Whether every directory has been resolved."""
        return all(getattr(self, f.name) for f in fields(self))

    def to_dict(self) -> dict[str, str | None]:
        """Return the fields keyed by their output names."""
        return {key.replace("_", "-"): value for key, value in asdict(self).items()}
