# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_GENERIC = 1  # Generic failure (fallback)
EXIT_THRESHOLD = 2  # Coverage below --fail-under-lines
EXIT_NOINPUT = 66  # Input file not found (e.g., lcov.info missing)
EXIT_IOERR = 74  # Reading sources or writing the report failed
EXIT_CONFIG = 78  # Page template could not be located
