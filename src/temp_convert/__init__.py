"""temp-convert — convert temperatures between Celsius, Fahrenheit and Kelvin.

Conversion always pivots through Celsius; values below absolute zero for
their source unit are rejected.
"""

from temp_convert.version import __version__

__all__: list[str] = ["__version__"]
