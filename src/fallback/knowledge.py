"""Static Indian dish knowledge base used by the fallback generator."""

# Authentic dishes keyed by lower-cased canonical ingredient name
DISHES_BY_INGREDIENT: dict[str, list[str]] = {
    "potato": ["Aloo Gobi", "Aloo Paratha", "Aloo Tikki", "Aloo Matar", "Bombay Potato", "Aloo Baingan", "Aloo Palak"],
    "onion": ["Pyaz Ki Sabzi", "Onion Pakoda", "Onion Curry", "Pyaz Ka Paratha", "Onion Bhaji", "Onion Raita"],
    "tomato": ["Tamatar Ki Sabzi", "Tomato Rice", "Tomato Curry", "Tamatar Ka Shorba", "Tomato Chutney", "Tomato Soup"],
    "rice": ["Jeera Rice", "Vegetable Pulao", "Lemon Rice", "Coconut Rice", "Biryani", "Curd Rice", "Tamarind Rice"],
    "dal": ["Dal Tadka", "Dal Fry", "Moong Dal", "Masoor Dal", "Chana Dal", "Dal Makhani", "Sambar", "Rasam"],
    "paneer": ["Paneer Butter Masala", "Palak Paneer", "Paneer Tikka", "Matar Paneer", "Kadai Paneer", "Shahi Paneer"],
    "chicken": ["Chicken Curry", "Butter Chicken", "Chicken Biryani", "Tandoori Chicken", "Chicken Tikka", "Chicken Korma"],
    "vegetables": ["Mixed Vegetable Curry", "Sabzi", "Vegetable Pulao", "Bhindi Masala", "Baingan Bharta", "Aloo Gobi"],
    "bread": ["Roti", "Naan", "Paratha", "Puri", "Bhatura", "Kulcha", "Roomali Roti"],
    "yogurt": ["Raita", "Kadhi", "Lassi", "Dahi Bhalla", "Shrikhand", "Chaas"],
    "lentils": ["Dal Tadka", "Sambar", "Rasam", "Khichdi", "Vada", "Idli", "Dosa"],
    "flour": ["Roti", "Paratha", "Puri", "Bhatura", "Naan", "Halwa", "Ladoo"],
    "milk": ["Kheer", "Rabri", "Basundi", "Kulfi", "Payasam", "Rasmalai"],
    "fruits": ["Fruit Chaat", "Mango Lassi", "Aamras", "Fruit Cream", "Fruit Custard", "Fruit Salad"],
    "nuts": ["Badam Milk", "Kaju Katli", "Badam Halwa", "Pista Kulfi", "Chikki", "Gajak"],
    "spices": ["Garam Masala", "Biryani", "Curry", "Masala Chai", "Tadka Dal", "Spiced Rice"],
}

# Canonical names from the normalizer that share another ingredient's dishes
INGREDIENT_ALIASES: dict[str, str] = {
    "wheat flour": "flour",
    "curd": "yogurt",
    "chawal": "rice",
}

REGIONAL_DISHES: dict[str, list[str]] = {
    "north": ["Chole Bhature", "Rajma Chawal", "Kadhi Pakora", "Butter Chicken", "Paneer Tikka", "Aloo Paratha"],
    "south": ["Dosa", "Idli Sambar", "Uttapam", "Rasam", "Appam", "Pongal", "Bisi Bele Bath"],
    "east": ["Macher Jhol", "Rasgulla", "Mishti Doi", "Luchi Aloor Dom", "Pitha", "Chingri Malai Curry"],
    "west": ["Dhokla", "Pav Bhaji", "Vada Pav", "Puran Poli", "Modak", "Shrikhand", "Undhiyu"],
    "street": ["Pani Puri", "Bhel Puri", "Samosa", "Kachori", "Jalebi", "Chaat", "Dabeli", "Vada Pav"],
}

# (low, high) ranges; the high bound is exclusive
COMPLEXITY_LEVELS: dict[str, dict[str, tuple[int, int]]] = {
    "easy": {"cook_time": (15, 25), "prep_time": (5, 15), "steps": (6, 10)},
    "medium": {"cook_time": (25, 40), "prep_time": (10, 20), "steps": (8, 12)},
    "hard": {"cook_time": (40, 60), "prep_time": (15, 30), "steps": (10, 15)},
}

MIN_STEPS = 8

COMMON_INGREDIENTS: list[str] = [
    "Onion - 1 large",
    "Tomato - 2 medium",
    "Ginger garlic paste - 1 tablespoon",
    "Green chilies - 2-3 pieces",
    "Cumin seeds - 1 teaspoon",
    "Mustard seeds - 1/2 teaspoon",
    "Turmeric powder - 1/2 teaspoon",
    "Red chili powder - 1 teaspoon",
    "Coriander powder - 1 teaspoon",
    "Garam masala - 1/2 teaspoon",
    "Salt - to taste",
    "Oil - 2 tablespoons",
    "Fresh coriander - for garnish",
    "Curry leaves - 8-10",
    "Asafoetida - a pinch",
    "Cardamom - 2-3 pods",
    "Cinnamon - 1 inch stick",
    "Cloves - 2-3",
    "Bay leaf - 1-2",
    "Black pepper - 1/2 teaspoon",
    "Ghee - 1 tablespoon",
    "Lemon juice - 1 teaspoon",
    "Yogurt - 1/4 cup",
    "Coconut - 2 tablespoons grated",
]

EXTRA_INGREDIENTS: list[str] = [
    "Cashews - 10-12 pieces",
    "Coconut milk - 1/2 cup",
    "Yogurt - 1/4 cup",
    "Lemon juice - 1 tablespoon",
    "Mint leaves - few sprigs",
    "Curry leaves - 8-10 pieces",
    "Fennel seeds - 1/2 teaspoon",
    "Cinnamon stick - 1 inch",
    "Cardamom - 2-3 pods",
    "Cloves - 2-3 pieces",
    "Saffron - a pinch",
    "Rose water - 1 teaspoon",
    "Kewra water - 1/2 teaspoon",
    "Dried fenugreek leaves - 1 teaspoon",
    "Poppy seeds - 1 teaspoon",
]

# Keyword in dish name -> staples added to its ingredient list
DISH_STAPLES: list[tuple[tuple[str, ...], list[str]]] = [
    (("Rice", "Pulao", "Biryani"), ["Basmati rice - 1 cup", "Water - 2 cups", "Bay leaves - 2 pieces"]),
    (("Dal",), ["Lentils - 1 cup", "Water - 3 cups", "Asafoetida - pinch"]),
    (("Paneer",), ["Paneer - 200g", "Cream - 2 tablespoons"]),
    (("Paratha",), ["Wheat flour - 2 cups", "Water - as needed", "Ghee - for cooking"]),
]

# {ingredient} is replaced by the main ingredient in lower case
STEP_TEMPLATES: list[str] = [
    "Heat oil in a pan",
    "Add cumin seeds and let them sizzle",
    "Add chopped onions and cook until golden",
    "Add ginger garlic paste and cook for 1 minute",
    "Add chopped tomatoes and cook until soft",
    "Add turmeric, red chili powder, and salt",
    "Mix all spices well",
    "Add {ingredient} and mix gently",
    "Add a little water if needed",
    "Cover and cook on low heat",
    "Cook until tender",
    "Add garam masala and mix",
    "Taste and add more salt if needed",
    "Garnish with fresh coriander",
    "Serve hot with rice or roti",
]

# Keyword in dish name -> steps prepended to the template
DISH_PREP_STEPS: list[tuple[tuple[str, ...], list[str]]] = [
    (("Rice", "Pulao", "Biryani"), ["Wash rice and soak for 20 minutes", "Drain the water from rice"]),
    (("Dal",), ["Wash lentils 3-4 times", "Soak lentils for 15 minutes"]),
]

# Keyword in dish name -> candidate meal types
MEAL_TYPE_KEYWORDS: list[tuple[tuple[str, ...], tuple[str, ...]]] = [
    (("Paratha", "Poha", "Upma"), ("breakfast",)),
    (("Rice", "Pulao", "Biryani"), ("lunch", "dinner")),
    (("Pakoda", "Tikka", "Samosa"), ("snack",)),
]
