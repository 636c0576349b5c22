"""External build contract for emitted source.

The emitted source is not self-sufficient: it includes an interface header and
a fragment holding the packed image bytes, and relies on a compile-time map
library for codepoint lookup. These types make that coupling explicit.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class CompanionArtifact:
    """A file the consuming build must provide next to the emitted source.

    Attributes:
        name: Include path used in the emitted source
        shape: What the file is expected to contain
    """

    name: str
    shape: str


@dataclass(frozen=True, slots=True)
class ExternalContract:
    """Everything the emitted source expects from the consuming build.

    Attributes:
        lookup_header: Compile-time map library header
        interface_declaration: Header declaring the emitted types and templates
        image_payload: Fragment holding the packed image bytes
        namespace: C++ namespace wrapping the emitted definitions
        data_array: Name of the raw image byte array
        data_accessor: Name of the function returning the image bytes
    """

    lookup_header: CompanionArtifact = field(
        default_factory=lambda: CompanionArtifact(
            "mapbox/eternal.hpp", "header-only library exposing mapbox::eternal::map"
        )
    )
    interface_declaration: CompanionArtifact = field(
        default_factory=lambda: CompanionArtifact(
            "atlas.hpp", "declarations of atlas_t, metrics_t, glyph_t and template font<N>"
        )
    )
    image_payload: CompanionArtifact = field(
        default_factory=lambda: CompanionArtifact(
            "atlas.bin.h", "comma-separated unsigned char initializer list of the packed image"
        )
    )
    namespace: str = "nie::atlas"
    data_array: str = "raw_data"
    data_accessor: str = "data"

    @property
    def artifacts(self) -> tuple[CompanionArtifact, ...]:
        """All companion artifacts in include order."""
        return (self.lookup_header, self.interface_declaration, self.image_payload)
