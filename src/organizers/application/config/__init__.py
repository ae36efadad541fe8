"""Design documents and editor settings.

Stored designs and editor settings are JSON files validated by the Pydantic
models here. The loader reports every failure as ``ConfigError``; the
validator adds layout checks and build advisories; the adapters move data
between these models and the domain layout.

Public API:
    - DesignConfiguration: Root model of a stored design
    - DimensionsConfig: Drawer dimensions model
    - LayoutConfig: Layout blob model (blocks, splitLines, selectedMaterial)
    - BlockConfig: Compartment model
    - SplitLineConfig: Divider line model
    - EditorSettings: Session settings model
    - PricingConfig: Pricing rates model
    - load_design: Load a design from a JSON file
    - load_design_from_dict: Load a design from a dictionary
    - load_settings: Load editor settings
    - ConfigError: Exception for loading errors
    - ValidationResult: Container for validation results
    - validate_design: Perform full design validation
    - config_to_layout: Convert a design to a live layout

Example:
    >>> from pathlib import Path
    >>> from organizers.application.config import load_design, ConfigError
    >>>
    >>> try:
    ...     design = load_design(Path("kitchen-drawer.json"))
    ...     print(f"Drawer: {design.dimensions.width}x{design.dimensions.depth}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from organizers.application.config.adapter import (
    CURRENT_SCHEMA_VERSION,
    config_to_dimensions,
    config_to_layout,
    config_to_snapshot,
    snapshot_to_layout_config,
)
from organizers.application.config.loader import (
    ConfigError,
    load_design,
    load_design_from_dict,
    load_settings,
)
from organizers.application.config.schema import (
    SUPPORTED_VERSIONS,
    BlockConfig,
    DesignConfiguration,
    DimensionsConfig,
    EditorSettings,
    LayoutConfig,
    PricingConfig,
    SplitLineConfig,
)
from organizers.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_layout_advisories,
    validate_design,
)

__all__ = [
    "CURRENT_SCHEMA_VERSION",
    "SUPPORTED_VERSIONS",
    "BlockConfig",
    "ConfigError",
    "DesignConfiguration",
    "DimensionsConfig",
    "EditorSettings",
    "LayoutConfig",
    "PricingConfig",
    "SplitLineConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_layout_advisories",
    "config_to_dimensions",
    "config_to_layout",
    "config_to_snapshot",
    "load_design",
    "load_design_from_dict",
    "load_settings",
    "snapshot_to_layout_config",
    "validate_design",
]
