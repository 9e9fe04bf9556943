from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True, slots=True)
class StorageConfig:
    """
    Where filter selections are kept between launches.

    `data_dir` stays None until bootstrap resolves the application data
    directory; `selections_dir` is derived from it.
    """
    app_name: str
    org: str
    selections_subdir: str
    data_dir: Path | None = None

    @property
    def selections_dir(self) -> Path:
        if self.data_dir is None:
            raise ValueError("StorageConfig.data_dir is not resolved yet.")
        return self.data_dir / self.selections_subdir

    def validate(self) -> None:
        if not isinstance(self.app_name, str) or not self.app_name.strip():
            raise ValueError("StorageConfig.app_name must be a non-empty string.")
        if not isinstance(self.org, str) or not self.org.strip():
            raise ValueError("StorageConfig.org must be a non-empty string.")
        if not isinstance(self.selections_subdir, str) or not self.selections_subdir.strip():
            raise ValueError("StorageConfig.selections_subdir must be a non-empty string.")
        if Path(self.selections_subdir).is_absolute():
            raise ValueError("StorageConfig.selections_subdir must be a relative path.")

    def validate_resolved(self) -> None:
        # Call this AFTER bootstrapping
        if self.data_dir is None:
            raise ValueError("Resolved data directory missing")
        if self.selections_dir.exists() and not self.selections_dir.is_dir():
            raise ValueError(f"selections_dir exists but is not a directory: {self.selections_dir}")

    @staticmethod
    def from_strings(
        app_name: str,
        org: str,
        selections_subdir: str = "selections",
        data_dir: str | Path | None = None,
    ) -> "StorageConfig":
        cfg = StorageConfig(
            app_name=app_name,
            org=org,
            selections_subdir=selections_subdir,
            data_dir=StorageConfig._norm(data_dir) if data_dir else None,
        )
        cfg.validate()
        return cfg

    @staticmethod
    def _norm(p: str | Path) -> Path:
        """
        Normalize a path: expand ~ and resolve to an absolute path.
        """
        return Path(p).expanduser().resolve()
