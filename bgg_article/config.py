# config.py - constants for the board game article engine
import os

# Data
DEFAULT_JSON_PATH = "data/games_processed.json"
DATA_PATH = os.environ.get("BGG_ARTICLE_DATA", DEFAULT_JSON_PATH)
LOG_LEVEL = os.environ.get("BGG_ARTICLE_LOG_LEVEL", "INFO").strip().upper()

# Column aliases accepted when reading a dataset (first match wins)
COLUMN_ALIASES = {
    "name": ["name", "Name"],
    "year": ["year", "Year Published", "YearPublished"],
    "weight": ["weight", "GameWeight", "Complexity Average"],
    "rating": ["rating", "AvgRating", "Rating Average"],
    "playtime": ["playtime", "Play Time", "MfgPlaytime"],
    "mechanics": ["mechanics", "Mechanics"],
}

# Plot axes
WEIGHT_DOMAIN = (1.0, 5.0)
RATING_DOMAIN = (0.0, 10.0)
RECENT_YEAR = 2015  # complexity chart highlights games published after this

# Sampling budgets (points drawn)
COMPLEXITY_SAMPLE_SIZE = int(os.environ.get("BGG_ARTICLE_COMPLEXITY_SAMPLE", 15000))
RESULTS_BACKGROUND_SIZE = int(os.environ.get("BGG_ARTICLE_BACKGROUND_SAMPLE", 2000))

# Builder
BUILDER_WEIGHT_TOLERANCE = 0.5
BUILDER_PLAYTIME_TOLERANCE = 30
BUILDER_MIN_MATCHES = 5
BUILDER_TOP_N = 3

# Match score
SCORE_WEIGHT_POINTS = 40
SCORE_WEIGHT_SPREAD = 4.0
SCORE_PLAYTIME_POINTS = 20
SCORE_PLAYTIME_SPREAD = 180
SCORE_MECHANIC_POINTS = 25
SCORE_YEAR_POINTS = 15
SCORE_YEAR_SPREAD = 30

DEFAULT_WEIGHT = 2.5
DEFAULT_PLAYTIME = 60
DEFAULT_YEAR = 2015
DEFAULT_USER_RATING = 7.0  # plotted rating when nothing matched

# Mechanic selector values meaning "no preference"
WILDCARD_MECHANICS = {"any", "all"}

# Quiz results
SIMILAR_GAMES_N = 100
BEST_MATCHES_K = 5
QUIZ_KEYS = ["playtime", "weight", "players", "mechanic", "year"]

# Mechanics evolution chart
TOP_MECHANICS = [
    "Dice Rolling", "Hand Management", "Cooperative Game",
    "Deck, Bag, and Pool Building", "Area Majority / Influence",
]
BUILDER_MECHANICS = [
    "Dice Rolling", "Hand Management", "Set Collection", "Worker Placement",
    "Cooperative Game", "Deck, Bag, and Pool Building", "Area Majority / Influence",
    "Tile Placement", "Variable Player Powers",
]
