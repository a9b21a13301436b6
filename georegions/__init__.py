"""GeoRegions package.

The GeoRegions package answers containment queries over the UN M.49 / CLDR territory hierarchy for
custom regions built by including and excluding region and country codes.
"""

__all__ = ["Region", "normalize_code"]
__app_name__ = "georegions"
__version__ = "1.0.0"

from georegions.codes import normalize_code
from georegions.region import Region
