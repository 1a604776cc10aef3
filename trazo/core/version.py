"""TrazoSvg - version constants.

Keep this module tiny and dependency-free. It is imported by settings,
spline fitting and the path builder and must not have side effects.
"""

APP_NAME = "TrazoSvg"
APP_SHORT = "trazo"

APP_VERSION = "0.1.0"

# Defaults de ajuste de splines.
# NOTE: "canonical" es el default histórico (modo "cubic" del builder).
DEFAULT_TENSION = 1.0
DEFAULT_SPLINE_ALGORITHM = "canonical"
