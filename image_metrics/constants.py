# Path: image_metrics/constants.py
"""
Image Metrics Module Constants

Module-wide constants for native-image build metric verification.
Filesystem conventions here match what the native-image build step
writes into the project's build directory.
"""

# ==============================================================================
# BUILD OUTPUT DISCOVERY
# ==============================================================================

# Build directory relative to the working directory
DEFAULT_BUILD_DIR = 'target'

# Suffix of the native-image build directory (matched case-insensitively)
# Example: target/my-app-1.0.0-native-image-source-jar
NATIVE_IMAGE_DIR_SUFFIX = '-native-image-source-jar'

# Suffix of the build statistics report (matched case-insensitively)
# Example: my-app-1.0.0-runner-build-output-stats.json
BUILD_OUTPUT_STATS_SUFFIX = '-build-output-stats.json'

# ==============================================================================
# EXPECTATIONS
# ==============================================================================

# Default properties resource holding expected metric values
DEFAULT_PROPERTIES_FILE = 'image-metrics-test.properties'

# Suffix marking the tolerance entry of an expectation key
TOLERANCE_SUFFIX = '.tolerance'

# Separator between segments of a metric key
PATH_SEPARATOR = '.'

# Directories searched for the properties resource, relative to cwd
DEFAULT_RESOURCE_DIRS = [
    'src/test/resources',
    'tests/resources',
    '.',
]

# Divisor turning a tolerance percentage into a fraction
PERCENT = 100

# ==============================================================================
# ENCODING
# ==============================================================================

REPORT_ENCODING = 'utf-8'

# java.util.Properties files are ISO-8859-1 unless \u escapes are used
PROPERTIES_ENCODING = 'latin-1'

# ==============================================================================
# LOGGING LAYERS (IPO)
# ==============================================================================

LOG_LAYER_INPUT = 'input'
LOG_LAYER_PROCESS = 'process'
LOG_LAYER_OUTPUT = 'output'

LOG_LAYERS = [
    LOG_LAYER_INPUT,
    LOG_LAYER_PROCESS,
    LOG_LAYER_OUTPUT,
]
