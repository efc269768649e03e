# brokeuni_travel/api/constants.py
"""Option lists shown on the planner form.

The first entry of each preference list is the form default.
"""

INTERESTS_OPTIONS = (
    "Foodie",
    "Art & Culture",
    "History",
    "Nightlife",
    "Nature & Outdoors",
    "Shopping",
    "Live Music",
    "Sport",
    "Photography",
    "Chill Vibes",
)

TRAVEL_PREFERENCES = (
    "Public Transport",
    "Walking",
    "Cycling",
    "Car Share",
)

DIETARY_PREFERENCES = (
    "No Preference",
    "Vegetarian",
    "Vegan",
    "Halal",
    "Kosher",
    "Gluten-Free",
)

# Captions that float around the cauldron while the plan is generated.
LOADING_ITEMS = (
    "Meal deals",
    "Student discounts",
    "Railcard",
    "Free museums",
    "Cheap eats",
    "Happy hour",
    "Coach tickets",
    "Charity shops",
    "Picnic spots",
    "Street food",
    "Free walking tour",
    "Tap water",
)
