"""Constants and error message templates for the SOM core."""

# Lattice columns
X = 0
Y = 1

# Frequency table column names
INDEX_COLUMN = "index"
X_COLUMN = "X"
Y_COLUMN = "Y"
POPULATION_COLUMN = "Population"
TABLE_COLUMNS = (INDEX_COLUMN, X_COLUMN, Y_COLUMN, POPULATION_COLUMN)

# Gaussian kernel: sigma = radius / KERNEL_RADIUS_DIVISOR
KERNEL_RADIUS_DIVISOR = 3.0

# Default number of samples per vectorized BMU chunk
DEFAULT_BMU_CHUNK_SIZE = 4096

# Error messages
INVALID_DIMENSION_MSG = "Grid dimension {} must be a positive integer, got {!r}"
COL_NUM_MSG = "Number of columns in {} does not match: expected {}, got {}"
GRID_SHAPE_MSG = "Invalid grid shape: expected (n_neurons, 2), got {}"
DISTANCE_MATRIX_SHAPE_MSG = "Invalid distance matrix shape: expected a square matrix, got {}"
SAMPLE_SHAPE_MSG = "Invalid sample shape: expected a vector of length {}, got shape {}"
CODES_SHAPE_MSG = "Invalid codebook shape: expected (n_neurons, n_features), got {}"
PARAMS_SHAPE_MSG = "Invalid normalization parameters: expected shape (2, {}), got {}"
DEGENERATE_COLUMNS_MSG = "Zero or non-finite scale in column(s) {} under '{}' normalization"
NON_NUMERIC_MSG = "Unable to convert training data to a float64 matrix: {}"
NON_FINITE_MSG = "Training data contains {} NaN or infinite value(s)"
WINNER_RANGE_MSG = "Winner index out of range [0, {}): found {}"
LENGTH_MSG = "Length of {} does not match: expected {}, got {}"
RESERVED_LABEL_MSG = "Class label(s) {} collide with frequency table column(s) {}"
DUPLICATE_LABEL_MSG = "Class labels {} map to the same column name"
