"""
Configuration for a tokenweave build.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class BuildConfig:
    """Configuration for the build driver."""

    # Input
    tokens_path: Path = field(default_factory=lambda: Path("figma-tokens/$tokens.json"))
    overlays: list[Path] = field(default_factory=list)  # merged onto the document in order

    # Product scope
    product: str = "ivy-framework"
    scope_id: Optional[str] = None  # defaults to core.<product> for layered documents

    # Output
    output_dir: Path = field(default_factory=lambda: Path("dist"))
    namespace: str = "Ivy.Themes"
    strict_aliases: bool = False
    validate: bool = False  # run validate_document before emitting

    # Version check
    check_versions: bool = True
    package_json_path: Path = field(default_factory=lambda: Path("package.json"))
    csproj_path: Path = field(default_factory=lambda: Path("Ivy.DesignSystem.csproj"))

    def __post_init__(self):
        """Normalize path fields given as strings."""
        self.tokens_path = Path(self.tokens_path)
        self.output_dir = Path(self.output_dir)
        self.package_json_path = Path(self.package_json_path)
        self.csproj_path = Path(self.csproj_path)
        self.overlays = [Path(p) for p in self.overlays]

    @property
    def class_prefix(self) -> str:
        """PascalCase product name used for generated C# class names."""
        return "".join(part[:1].upper() + part[1:] for part in self.product.split("-") if part)
