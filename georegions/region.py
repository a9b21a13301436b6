"""Custom regions built from included and excluded region and country codes."""

__all__ = ["Region"]

import logging
import re
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationInfo, field_validator

from georegions.closure import common_ancestors, descendant_closure
from georegions.codes import normalize_code, normalize_codes
from georegions.exceptions import InvalidCodeError
from georegions.flags import flag
from georegions.tables import NON_COUNTRIES
from georegions.utils.threading import with_lock

logger = logging.getLogger(__name__)

COUNTRY_CODE = re.compile(r"[A-Z]{2}")


class Region(BaseModel):
    """A custom region.

    The region is the union of everything contained in the `include` codes, minus everything
    contained in the `exclude` codes. Exclusion always wins: a code under an excluded region is not
    in the custom region even if an included region also reaches it through another path.

    Derived sets are computed on first use and cached for the lifetime of the instance.

    Example:
        >>> region = Region(include="150", exclude="EU")
        >>> region.contains("CH")
        True
        >>> region.contains("FR")
        False

    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    includes: tuple[str, ...] = Field(alias="include")
    """The normalised codes that make up the region."""
    excludes: tuple[str, ...] = Field(default=(), alias="exclude")
    """The normalised codes removed from the region."""

    _children: Optional[frozenset[str]] = PrivateAttr(default=None)
    _parents: Optional[frozenset[str]] = PrivateAttr(default=None)
    _countries: Optional[tuple[str, ...]] = PrivateAttr(default=None)

    @field_validator("includes", "excludes", mode="before")
    @classmethod
    def validate_codes(cls, value: Any, info: ValidationInfo) -> tuple[str, ...]:
        """Normalise the included or excluded codes.

        Args:
            value (Any): A single code or a sequence of codes.
            info (ValidationInfo): The validation information.

        Returns:
            tuple[str, ...]: The normalised codes.

        Raises:
            InvalidCodeError: If a value cannot be interpreted as a code.

        """
        if value is None and info.field_name == "includes":
            raise InvalidCodeError("A region must be constructed with include codes")

        return normalize_codes(value)

    def model_post_init(self, __context: Any) -> None:
        """Compute the derived sets up front when eager closure is enabled."""
        _warm(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        return (self.includes, self.excludes) == (other.includes, other.excludes)

    def __hash__(self) -> int:
        return hash((self.includes, self.excludes))

    def __contains__(self, code: Any) -> bool:
        return self.contains(code)

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> "Region":
        """Return a copy of the region.

        Updated include and exclude codes are normalised, and the copy computes its own derived
        sets rather than sharing those of this region.

        Args:
            update (Optional[Mapping[str, Any]], optional): Values to change in the copy. Defaults
                to None.
            deep (bool, optional): Whether to deep copy. Defaults to False.

        Returns:
            Region: The copied region.

        """
        if not update:
            return super().model_copy(deep=deep)

        return type(self).model_validate({**self.model_dump(), **update})

    @property
    @with_lock
    def children(self) -> frozenset[str]:
        """Every code in the region, excluded codes and their descendants removed."""
        if self._children is None:
            self._children = descendant_closure(self.includes) - descendant_closure(
                self.excludes
            )
            logger.debug("Resolved %d codes for %r", len(self._children), self)

        return self._children

    @property
    @with_lock
    def parents(self) -> frozenset[str]:
        """Every code that contains the whole region, i.e. the common ancestors of the includes."""
        if self._parents is None:
            self._parents = common_ancestors(self.includes)
            logger.debug("Resolved %d enclosing codes for %r", len(self._parents), self)

        return self._parents

    @property
    @with_lock
    def country_codes(self) -> tuple[str, ...]:
        """The sorted country codes in the region."""
        if self._countries is None:
            self._countries = tuple(
                sorted(
                    code
                    for code in self.children
                    if COUNTRY_CODE.fullmatch(code) and code not in NON_COUNTRIES
                )
            )

        return self._countries

    def contains(self, code: Any) -> bool:
        """Return True if the code is within the custom region.

        Args:
            code (Any): A region or country code, in any accepted form.

        Returns:
            bool: Whether the code is in the region.

        """
        return normalize_code(code) in self.children

    def is_within(self, code: Any) -> bool:
        """Return True if the whole custom region is within the given region.

        Every included code must be inside `code` (or be `code` itself).

        Args:
            code (Any): A region or country code, in any accepted form.

        Returns:
            bool: Whether the region lies entirely within `code`.

        """
        return normalize_code(code) in self.parents

    def countries(self) -> list[str]:
        """Return the sorted country codes in the custom region."""
        return list(self.country_codes)


@flag("eager_closure")
def _warm(region: Region) -> None:
    _ = (region.children, region.parents, region.country_codes)
