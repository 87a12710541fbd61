RUNS = 11
RANDOM_SEED = 42

# Distinct values per sample; each sample holds 2 * n - 1 elements.
SMALL_SAMPLE_SIZE = 1024
MID_SAMPLE_SIZE = 20_000
BIG_SAMPLE_SIZE = 300_000
SAMPLE_SIZES = [0, 2, 10, 64, SMALL_SAMPLE_SIZE, MID_SAMPLE_SIZE, BIG_SAMPLE_SIZE, 1_000_000]

RESULTS_BASE_PATH = 'results/'
SINGLETON_PATH = 'singleton/'
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
STATS_HEADER = "Run,Timestamp,Time(s),Size,MElements/s\n"
