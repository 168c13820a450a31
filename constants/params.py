RUNS = 11

SMALL_ARRAY_LENGTH = 1_000
MID_ARRAY_LENGTH = 10_000
BIG_ARRAY_LENGTH = 100_000

RANDOM_SEED = 42
MAX_ARRAY_VALUE = 1_000_000

# Decimal digits, so one bucket per digit value 0-9
RADIX_BASE = 10

DEMO_SORTED_ARRAY = [4, 7, 9, 50, 83, 123, 211, 1024, 1337, 9001]

RESULTS_BASE_PATH = 'results/'
RADIX_SORT_PATH = 'radix_sort/'
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
