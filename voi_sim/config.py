"""
Default parameters for the value-of-information and profit experiments.

Every value here can be overridden from the command line.
"""

# Randomness
BASE_SEED = 12345

# Sample sizes
N_SAMPLES = 100_000
N_REPETITIONS = 1_000_000

# Coin-flip wager
WIN_AMOUNT = 200.0
LOSE_AMOUNT = 100.0
P_HEADS = 0.5
MAX_PRICE = 200

# Percentile pair used for 90% intervals
P_LOW = 0.05
P_HIGH = 0.95

# Profit model constants
OPERATING_DAYS = 300
LABOR_COST = 150_000.0
STANDARD_VAT = 0.25
REDUCED_VAT = 0.12
INCOME_TAX = 0.20

# 90% intervals for the profit model inputs
CUSTOMERS_RANGE = (10.0, 40.0)
SPEND_RANGE = (30.0, 70.0)  # log-normal
VAT_MIX_RANGE = (5.0, 25.0)

# Histograms
HIST_BINS = 50
