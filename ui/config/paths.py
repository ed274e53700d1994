"""Application paths configuration."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppPaths:
    config_path: Path
    css_path: Path

    @classmethod
    def default(cls) -> "AppPaths":
        ui_dir = Path(__file__).parent.parent

        return cls(
            config_path=Path("settings.yml"),
            css_path=ui_dir / "style.css",
        )
