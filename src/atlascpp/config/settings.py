"""Configuration settings for Atlascpp."""

from pathlib import Path

from pydantic import BaseModel, Field

from atlascpp.domain.contract import CompanionArtifact, ExternalContract


class ContractConfig(BaseModel):
    """Names the emitted source uses to refer to companion build artifacts.

    The consuming build must provide every artifact named here; the exporter
    never produces them.
    """

    lookup_header: str = Field(
        default="mapbox/eternal.hpp",
        description="Header providing the compile-time map used for codepoint lookup",
    )
    interface_header: str = Field(
        default="atlas.hpp",
        description="Header declaring atlas_t, metrics_t, glyph_t and font<N>",
    )
    image_payload: str = Field(
        default="atlas.bin.h",
        description="Fragment holding the packed image as a comma-separated byte list",
    )
    namespace: str = Field(
        default="nie::atlas",
        description="C++ namespace wrapping all emitted definitions",
    )

    def to_contract(self) -> ExternalContract:
        """Build the external contract described by this configuration.

        Returns:
            ExternalContract with one CompanionArtifact per referenced file
        """
        return ExternalContract(
            lookup_header=CompanionArtifact(
                name=self.lookup_header,
                shape="header-only library exposing mapbox::eternal::map",
            ),
            interface_declaration=CompanionArtifact(
                name=self.interface_header,
                shape="declarations of atlas_t, metrics_t, glyph_t and template font<N>",
            ),
            image_payload=CompanionArtifact(
                name=self.image_payload,
                shape="comma-separated unsigned char initializer list of the packed image",
            ),
            namespace=self.namespace,
        )


class ExportConfig(BaseModel):
    """Configuration for source export."""

    kerning: bool = Field(
        default=False,
        description="Request kerning data (reserved, currently not emitted)",
    )
    atomic: bool = Field(
        default=True,
        description="Write to a temporary file and publish only on success",
    )
    em_normalize_font_metrics: bool = Field(
        default=True,
        description="Scale metrics read from font files to em units",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class AtlasCppSettings(BaseModel):
    """Main application settings."""

    contract: ContractConfig = Field(default_factory=ContractConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> AtlasCppSettings:
    """Get default application settings."""
    return AtlasCppSettings()
