"""Keys of the YAML run configuration."""

# Element data
DATA_FILE_KEY = "data_file"

# Words to decompose
WORDS_KEY = "words"
LOWERCASE_KEY = "lowercase"

# Report export
OUTPUT_FILE_KEY = "output_file"

VALID_CONFIG_KEYS = frozenset({
    DATA_FILE_KEY,
    WORDS_KEY,
    LOWERCASE_KEY,
    OUTPUT_FILE_KEY,
})
