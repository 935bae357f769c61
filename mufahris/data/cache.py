"""
Caller-owned morphology cache.

The caller constructs one cache per session and passes it to whatever
needs the parsed annotation. Each file is parsed at most once per cache.
"""

from pathlib import Path
from typing import Callable, Optional

from mufahris.config import get_settings
from mufahris.data.annotation import load_annotation_file
from mufahris.exceptions import MorphologyDataError
from mufahris.models import MorphologyRecord


MorphologyMap = dict[str, MorphologyRecord]


class MorphologyCache:
    """
    Parsed morphology maps, keyed by resolved file path.

    Example:
        cache = MorphologyCache()
        records = cache.get("data/quranic-corpus-morphology-0.4.txt")
        records_again = cache.get("data/quranic-corpus-morphology-0.4.txt")  # no re-parse
    """

    def __init__(self, loader: Optional[Callable[[Path], MorphologyMap]] = None):
        """
        Initialize the cache.

        Args:
            loader: Function reading one path into records
                (default: load_annotation_file)
        """
        self._loader = loader or load_annotation_file
        self._maps: dict[Path, MorphologyMap] = {}

    def get(self, path: str | Path | None = None) -> MorphologyMap:
        """
        Records for a file, parsing it on first access.

        Args:
            path: Annotation file (default: settings.morphology_path)

        Raises:
            MorphologyDataError: If no path is configured or loading fails
        """
        if path is None:
            path = get_settings().morphology_path
        if path is None:
            raise MorphologyDataError(
                "No morphology file given. "
                "Pass a path or set the MUFAHRIS_MORPHOLOGY_PATH env var."
            )

        key = Path(path).resolve()
        if key not in self._maps:
            self._maps[key] = self._loader(key)
        return self._maps[key]

    def __contains__(self, path: str | Path) -> bool:
        return Path(path).resolve() in self._maps

    def __len__(self) -> int:
        return len(self._maps)

    def clear(self) -> None:
        """Forget all parsed maps."""
        self._maps.clear()
