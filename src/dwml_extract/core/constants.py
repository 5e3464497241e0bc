"""
DWML element and attribute names.

Based on the NDFD XML design document (MDL_XML_Design.pdf). Names not listed
here are never read by the extractor.
"""

# Top-level structure
DATA_ELEMENT = "data"
LOCATION_ELEMENT = "location"
TIME_LAYOUT_ELEMENT = "time-layout"
PARAMETERS_ELEMENT = "parameters"

# Location
LOCATION_KEY_ELEMENT = "location-key"
POINT_ELEMENT = "point"
LATITUDE_ATTRIBUTE = "latitude"
LONGITUDE_ATTRIBUTE = "longitude"

# Time layout
LAYOUT_KEY_ELEMENT = "layout-key"
START_VALID_TIME_ELEMENT = "start-valid-time"
END_VALID_TIME_ELEMENT = "end-valid-time"
TIME_COORDINATE_ATTRIBUTE = "time-coordinate"
LAYOUT_KEY_SEPARATOR = "-"

# Parameters
APPLICABLE_LOCATION_ATTRIBUTE = "applicable-location"
TIME_LAYOUT_ATTRIBUTE = "time-layout"
TYPE_ATTRIBUTE = "type"
UNITS_ATTRIBUTE = "units"
NAME_ELEMENT = "name"
ICON_LINK_ELEMENT = "icon-link"
VALUE_ELEMENT = "value"

# Parameter kinds accepted in configuration
PARAMETER_KIND_ICON = "icon"
PARAMETER_KIND_NUMERIC = "numeric"

# Defaults
DEFAULT_JSON_INDENT = 2
