from typing import Final, Dict, Tuple

# Nutrient keys, in output order. Values in the reference table are per 100 g.
NUTRIENT_KEYS: Final[Tuple[str, ...]] = (
    "calories", "protein", "carbs", "fat", "sodium", "sugars",
    "fiber", "potassium", "iron", "calcium", "vitaminD",
)

DEFAULT_UNIT: Final[str] = "g"

# Daily values based on 2000 calorie diet (FDA guidelines)
DAILY_VALUES: Final[Dict[str, float]] = {
    "calories": 2000,
    "fat": 65,          # g
    "carbs": 300,       # g
    "fiber": 25,        # g
    "sugars": 50,       # g (WHO recommendation, no official DV)
    "protein": 50,      # g
    "sodium": 2300,     # mg
    "potassium": 4700,  # mg
    "iron": 18,         # mg
    "calcium": 1300,    # mg
    "vitaminD": 20,     # mcg
}

ALLERGEN_KEYWORDS: Final[Dict[str, Tuple[str, ...]]] = {
    "milk": ("milk", "cheese", "butter", "cream", "yogurt", "dairy"),
    "egg": ("egg", "eggs"),
    "fish": ("fish", "salmon", "tuna", "cod", "mackerel"),
    "crustacean_shellfish": ("shrimp", "crab", "lobster", "prawn"),
    "tree_nuts": ("almond", "walnut", "pecan", "cashew", "pistachio", "hazelnut"),
    "peanuts": ("peanut", "peanuts"),
    "wheat": ("wheat", "flour", "bread", "pasta", "gluten"),
    "soy": ("soy", "tofu", "soy sauce", "miso"),
    "sesame": ("sesame", "tahini"),
}

# Suggestion thresholds (per serving)
HIGH_CALORIES_PER_SERVING: Final[float] = 800
HIGH_SODIUM_PER_SERVING: Final[float] = 1000   # mg
LOW_PROTEIN_PER_SERVING: Final[float] = 10     # g
