user_fixtures = [
    {"username": "chef_moderator", "email": "moderator@example.org", "first_name": "Mona", "last_name": "Reyes"},
    {"username": "john_doe", "email": "john.doe@example.org", "first_name": "John", "last_name": "Doe"},
    {"username": "jane_doe", "email": "jane.doe@example.org", "first_name": "Jane", "last_name": "Doe"},
]

thumbnail_url_pool = [
    "https://images.snapchef.dev/recipes/meal1.jpg",
    "https://images.snapchef.dev/recipes/meal2.jpg",
    "https://images.snapchef.dev/recipes/meal3.jpg",
    "https://images.snapchef.dev/recipes/meal4.jpg",
    "https://images.snapchef.dev/recipes/meal5.jpg",
    "https://images.snapchef.dev/recipes/meal6.jpg",
]

BASE_INGREDIENT_POOL = [
    "salt",
    "black pepper",
    "olive oil",
    "garlic cloves",
    "red onion",
    "cherry tomatoes",
    "parmesan",
    "fresh basil",
    "chicken breast",
    "smoked paprika",
    "ground cumin",
    "yogurt",
    "baby spinach",
    "mushrooms",
    "lemon juice",
    "soy sauce",
    "white rice",
    "pasta",
    "butter",
    "plain flour",
    "eggs",
    "milk",
]

units = ["g", "ml", "tbsp", "tsp", "pcs", "cup"]

comment_phrases = [
    "Amazing!!",
    "Looks yummy",
    "Definitely will be trying this out",
    "made it last night, 10/10",
    "what did u use for the sauce?",
    "can i swap chicken for tofu??",
    "love how simple this is",
    "comfort food fr",
    "added extra garlic and yeah... wow",
    "pls drop the measurements",
    "",
]

bio_phrases = [
    "home cook who loves quick meals",
    "always experimenting with new flavours",
    "Meal prep enthusiast and pasta fan",
    "baking on weekends, cooking every day",
    "spice lover, especially in curries and stews",
    "i cook, i taste, i improvise",
]
