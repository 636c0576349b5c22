"""Exception hierarchy for Atlascpp."""


class AtlasCppError(Exception):
    """Base exception for all Atlascpp errors."""

    pass


class ExportError(AtlasCppError):
    """Errors raised while exporting atlas source."""

    pass


class UnsupportedYDirectionError(ExportError):
    """The atlas uses a vertical axis convention the exporter cannot emit."""

    def __init__(self, y_direction: str) -> None:
        self.y_direction = y_direction
        super().__init__(
            f"Unsupported atlas y direction '{y_direction}': only bottom-up atlases can be exported"
        )


class OutputError(ExportError):
    """Destination file could not be opened, written or published."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")


class LayoutError(AtlasCppError):
    """Errors related to reading an atlas layout."""

    pass


class AtlasLoadError(LayoutError):
    """Error loading an atlas layout file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load atlas layout '{path}': {reason}")


class AtlasFormatError(LayoutError):
    """Atlas layout is structurally invalid."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid atlas layout '{path}': {details}")


class FontMetricsError(AtlasCppError):
    """Error reading vertical metrics from a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read font metrics from '{path}': {reason}")
