"""Load section definitions from YAML files."""
import logging
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from seatbowl.config import SECTIONS_DIR
from seatbowl.errors import InvalidConfiguration
from seatbowl.models.geometry import Point2D
from seatbowl.models.section import Section
from seatbowl.models.tier import Tier

logger = logging.getLogger(__name__)


class SectionConfig(BaseModel):
    """A section as written in a YAML file."""
    id: str
    name: str = ""
    pof: Point2D = Field(default_factory=Point2D, description="Point of focus")
    tiers: list[Tier]

    def build(self) -> Section:
        """Synthesize the section described by this config."""
        return Section(self.tiers, pof=self.pof, name=self.name or self.id)


def available_sections(sections_dir: Path = SECTIONS_DIR) -> list[str]:
    """Get the ids of all section files in a directory."""
    if not sections_dir.exists():
        return []
    return sorted(p.stem for p in sections_dir.glob("*.yaml"))


def resolve_section_path(section: Union[str, Path], sections_dir: Path = SECTIONS_DIR) -> Path:
    """Accept a file path or a section id under sections_dir."""
    path = Path(section)
    if path.suffix in (".yaml", ".yml"):
        return path
    return sections_dir / f"{section}.yaml"


def load_section_config(section: Union[str, Path], sections_dir: Path = SECTIONS_DIR) -> SectionConfig:
    """
    Read and validate a section file.

    Args:
        section: Section id or path to a YAML file

    Returns:
        Validated SectionConfig
    """
    config_path = resolve_section_path(section, sections_dir)

    if not config_path.exists():
        raise FileNotFoundError(f"Section config not found: {config_path}")

    with open(config_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfiguration(f"Malformed YAML in {config_path}: {e}") from e

    if not isinstance(data, dict) or "section" not in data:
        raise InvalidConfiguration(f"{config_path} has no top-level 'section' key")

    try:
        config = SectionConfig(**data["section"])
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid section config in {config_path}:\n{e}") from e

    logger.debug("Loaded section %s with %d tiers from %s", config.id, len(config.tiers), config_path)
    return config


def load_section(section: Union[str, Path], sections_dir: Path = SECTIONS_DIR) -> Section:
    """Load a section file and synthesize it."""
    return load_section_config(section, sections_dir).build()


def section_to_dict(section: Section) -> dict:
    """Dump synthesized geometry to plain data, for JSON display."""
    tiers = []
    for tier in section.tiers:
        tiers.append({
            "index": tier.index,
            "points": [p.as_tuple() for p in tier.boundary_points()],
            "riser_heights": tier.riser_heights(),
            "spectators": [
                s.model_dump(include={"row_index", "eye", "eye_standing", "c_value", "has_sightline"})
                for s in tier.spectators()
            ],
        })
    return {"name": section.name, "pof": section.pof.as_tuple(), "tiers": tiers}
