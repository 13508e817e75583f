"""
Engineering Standards Registry.

Read-only catalog of EngineeringStandard records loaded from the YAML dataset
under ``data/standards``. The default registry is built once on first use and
shared by all callers; it is never mutated afterwards. Additional
jurisdictions are added by editing the dataset or by building a separate
registry with ``StandardsRegistry.from_yaml``.
"""

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

import yaml

from .models import EngineeringStandard, Formula, StandardCategory, StandardTable

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "data" / "standards"
DEFAULT_INDEX_PATH = DATA_DIR / "index.yaml"


class StandardsRegistry:
    """
    Immutable catalog of engineering standards.

    Args:
        standards: Standards in catalog order; ids must be unique
        combinations: Named lists of standard ids (e.g., "INDIAN")
        regional_preferences: Region name -> combination name
        default_combination: Combination used for unrecognized regions
        version: Dataset version label

    Raises:
        ValueError: On duplicate ids or preferences naming unknown
            combinations/standards

    Example:
        >>> registry = get_registry()
        >>> registry.find_standard_by_id("IS456_2000").name
        'IS 456:2000'
    """

    def __init__(
        self,
        standards: Iterable[EngineeringStandard],
        combinations: Mapping[str, Sequence[str]],
        regional_preferences: Mapping[str, str],
        default_combination: str,
        version: Optional[str] = None,
    ):
        self._standards = tuple(standards)
        self.version = version

        by_id: Dict[str, EngineeringStandard] = {}
        for standard in self._standards:
            if standard.id in by_id:
                raise ValueError(f"Duplicate standard id: {standard.id}")
            by_id[standard.id] = standard
        self._by_id = MappingProxyType(by_id)

        for name, ids in combinations.items():
            unknown = [i for i in ids if i not in by_id]
            if unknown:
                raise ValueError(f"Combination {name} references unknown standards: {unknown}")
        self._combinations = MappingProxyType(
            {name: tuple(ids) for name, ids in combinations.items()}
        )

        if default_combination not in self._combinations:
            raise ValueError(f"Unknown default combination: {default_combination}")
        self._default_combination = default_combination

        for region, combo in regional_preferences.items():
            if combo not in self._combinations:
                raise ValueError(f"Region {region} references unknown combination: {combo}")
        self._regional_preferences = MappingProxyType(dict(regional_preferences))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_yaml(cls, index_path: Union[str, Path] = DEFAULT_INDEX_PATH) -> 'StandardsRegistry':
        """
        Build a registry from a dataset index file.

        The index lists standard files (relative to the index), named
        combinations, regional preferences and the default combination.
        """
        index_path = Path(index_path)
        with open(index_path, 'r') as f:
            index = yaml.safe_load(f)

        standards: List[EngineeringStandard] = []
        for rel_path in index.get('files', []):
            standards.extend(load_standards_file(index_path.parent / rel_path))

        registry = cls(
            standards=standards,
            combinations=index.get('combinations', {}),
            regional_preferences=index.get('regional_preferences', {}),
            default_combination=index['default_combination'],
            version=index.get('version'),
        )
        logger.info(
            f"Loaded {len(registry)} engineering standards "
            f"(dataset {registry.version}) from {index_path}"
        )
        return registry

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._standards)

    def __contains__(self, standard_id: str) -> bool:
        return standard_id in self._by_id

    @property
    def standard_ids(self) -> List[str]:
        """All standard ids in catalog order."""
        return [s.id for s in self._standards]

    @property
    def combinations(self) -> Mapping[str, tuple]:
        return self._combinations

    @property
    def region_preferences(self) -> Dict[str, List[str]]:
        """Region -> recommended standard ids."""
        return {
            region: list(self._combinations[combo])
            for region, combo in self._regional_preferences.items()
        }

    def list_standards(self) -> List[EngineeringStandard]:
        """All standards in catalog order."""
        return list(self._standards)

    def find_standard_by_id(self, standard_id: str) -> Optional[EngineeringStandard]:
        """Standard with the given id, or None."""
        return self._by_id.get(standard_id)

    def get_standards_by_region(self, region: str) -> List[EngineeringStandard]:
        """Standards whose applicable regions contain ``region`` (case-insensitive)."""
        return [s for s in self._standards if s.applies_to(region)]

    def get_standards_by_category(
        self, category: Union[str, StandardCategory]
    ) -> List[EngineeringStandard]:
        """Standards with exactly this category."""
        key = category.value if isinstance(category, StandardCategory) else category
        return [s for s in self._standards if s.category.value == key]

    def get_recommended_standards(self, region: str) -> List[str]:
        """
        Recommended standard ids for a region.

        Unrecognized regions get the default combination (Indian standards in
        the bundled dataset).
        """
        combo = self._regional_preferences.get(region)
        if combo is None:
            logger.debug(
                f"No standards preference for region '{region}', "
                f"using {self._default_combination}"
            )
            combo = self._default_combination
        return list(self._combinations[combo])

    def get_formulas_for_parameter(self, standard_id: str, parameter: str) -> List[Formula]:
        """
        Formulas loosely related to a parameter.

        Advisory text search, not an authoritative lookup: a formula matches
        when any variable symbol contains ``parameter`` or its description
        contains ``parameter`` (case-insensitive).
        """
        standard = self.find_standard_by_id(standard_id)
        if standard is None:
            return []

        needle = parameter.lower()
        formulas = []
        for section in standard.sections:
            for formula in section.formulas:
                if any(parameter in v.symbol for v in formula.variables) or \
                        needle in formula.description.lower():
                    formulas.append(formula)
        return formulas

    def get_standard_tables(
        self, standard_id: str, clause: Optional[str] = None
    ) -> List[StandardTable]:
        """Reference tables of a standard, optionally limited to one clause."""
        standard = self.find_standard_by_id(standard_id)
        if standard is None:
            return []

        tables = []
        for section in standard.sections:
            if clause is None or section.clause == clause:
                tables.extend(section.tables)
        return tables


def load_standards_file(path: Union[str, Path]) -> List[EngineeringStandard]:
    """
    Parse a YAML file holding a list of standard records.

    Raises:
        ValueError: If the file does not contain a list
    """
    with open(path, 'r') as f:
        records: Any = yaml.safe_load(f)
    if not isinstance(records, list):
        raise ValueError(f"Standards file {path} must contain a list of standards")
    return [EngineeringStandard(**record) for record in records]


@lru_cache(maxsize=None)
def get_registry() -> StandardsRegistry:
    """Process-wide registry built from the bundled dataset on first call."""
    return StandardsRegistry.from_yaml(DEFAULT_INDEX_PATH)


# ============================================================================
# MODULE-LEVEL SHORTCUTS (default registry)
# ============================================================================

def get_standards_by_region(region: str) -> List[EngineeringStandard]:
    return get_registry().get_standards_by_region(region)


def get_standards_by_category(category: Union[str, StandardCategory]) -> List[EngineeringStandard]:
    return get_registry().get_standards_by_category(category)


def find_standard_by_id(standard_id: str) -> Optional[EngineeringStandard]:
    return get_registry().find_standard_by_id(standard_id)


def get_recommended_standards(region: str) -> List[str]:
    return get_registry().get_recommended_standards(region)


def get_formulas_for_parameter(standard_id: str, parameter: str) -> List[Formula]:
    return get_registry().get_formulas_for_parameter(standard_id, parameter)


def get_standard_tables(standard_id: str, clause: Optional[str] = None) -> List[StandardTable]:
    return get_registry().get_standard_tables(standard_id, clause)
