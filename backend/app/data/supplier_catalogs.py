"""Static supplier catalogs: base hotel rows per supplier, keyed by lowercase location.

Rows use the same field names as a live supplier response, so a catalog slice
can be wrapped and fed straight into the supplier's response mapper.
Several hotels appear in more than one catalog at different base prices.
"""

SUPPLIER_A_CATALOG: dict[str, list[dict]] = {
    "cairo": [
        {"name": "Grand Nile Hotel", "location": "Cairo, Egypt", "price_per_night": 120.00, "available_rooms": 15, "rating": 4.5},
        {"name": "Pyramids View Resort", "location": "Cairo, Egypt", "price_per_night": 95.00, "available_rooms": 8, "rating": 4.2},
        {"name": "Cairo Palace Hotel", "location": "Cairo, Egypt", "price_per_night": 85.00, "available_rooms": 12, "rating": 4.0},
    ],
    "dubai": [
        {"name": "Burj Al Arab", "location": "Dubai, UAE", "price_per_night": 450.00, "available_rooms": 3, "rating": 5.0},
        {"name": "Marina Bay Hotel", "location": "Dubai, UAE", "price_per_night": 180.00, "available_rooms": 20, "rating": 4.3},
        {"name": "Desert Oasis Resort", "location": "Dubai, UAE", "price_per_night": 220.00, "available_rooms": 7, "rating": 4.6},
    ],
    "london": [
        {"name": "The Ritz London", "location": "London, UK", "price_per_night": 380.00, "available_rooms": 5, "rating": 4.8},
        {"name": "Thames View Hotel", "location": "London, UK", "price_per_night": 150.00, "available_rooms": 18, "rating": 4.1},
        {"name": "Covent Garden Inn", "location": "London, UK", "price_per_night": 125.00, "available_rooms": 10, "rating": 3.9},
    ],
    "paris": [
        {"name": "Le Grand Hotel Paris", "location": "Paris, France", "price_per_night": 280.00, "available_rooms": 6, "rating": 4.7},
        {"name": "Eiffel Tower View Hotel", "location": "Paris, France", "price_per_night": 200.00, "available_rooms": 14, "rating": 4.4},
    ],
}

SUPPLIER_B_CATALOG: dict[str, list[dict]] = {
    "cairo": [
        {"name": "Grand Nile Hotel", "location": "Cairo, Egypt", "price_per_night": 110.00, "available_rooms": 10, "rating": 4.5},
        {"name": "Nile Boutique Hotel", "location": "Cairo, Egypt", "price_per_night": 75.00, "available_rooms": 6, "rating": 3.8},
        {"name": "Cairo Downtown Hotel", "location": "Cairo, Egypt", "price_per_night": 65.00, "available_rooms": 20, "rating": 3.5},
    ],
    "dubai": [
        {"name": "Atlantis The Palm", "location": "Dubai, UAE", "price_per_night": 320.00, "available_rooms": 8, "rating": 4.7},
        {"name": "Marina Bay Hotel", "location": "Dubai, UAE", "price_per_night": 195.00, "available_rooms": 15, "rating": 4.3},
        {"name": "JBR Beach Resort", "location": "Dubai, UAE", "price_per_night": 160.00, "available_rooms": 12, "rating": 4.1},
    ],
    "london": [
        {"name": "Savoy Hotel London", "location": "London, UK", "price_per_night": 420.00, "available_rooms": 4, "rating": 4.9},
        {"name": "Thames View Hotel", "location": "London, UK", "price_per_night": 140.00, "available_rooms": 22, "rating": 4.1},
        {"name": "Hyde Park Hotel", "location": "London, UK", "price_per_night": 180.00, "available_rooms": 8, "rating": 4.2},
    ],
    "paris": [
        {"name": "Hotel Plaza Athenee", "location": "Paris, France", "price_per_night": 350.00, "available_rooms": 3, "rating": 4.8},
        {"name": "Montmartre Boutique Hotel", "location": "Paris, France", "price_per_night": 130.00, "available_rooms": 16, "rating": 4.0},
        {"name": "Seine River Hotel", "location": "Paris, France", "price_per_night": 165.00, "available_rooms": 11, "rating": 4.3},
    ],
    "new york": [
        {"name": "The Plaza New York", "location": "New York, USA", "price_per_night": 480.00, "available_rooms": 2, "rating": 4.9},
        {"name": "Times Square Hotel", "location": "New York, USA", "price_per_night": 220.00, "available_rooms": 25, "rating": 4.2},
    ],
}

SUPPLIER_C_CATALOG: dict[str, list[dict]] = {
    "cairo": [
        {"name": "Four Seasons Cairo", "location": "Cairo, Egypt", "price_per_night": 250.00, "available_rooms": 4, "rating": 4.8},
        {"name": "Cairo Palace Hotel", "location": "Cairo, Egypt", "price_per_night": 80.00, "available_rooms": 18, "rating": 4.0},
    ],
    "dubai": [
        {"name": "Burj Al Arab", "location": "Dubai, UAE", "price_per_night": 420.00, "available_rooms": 5, "rating": 5.0},
        {"name": "Emirates Palace Hotel", "location": "Dubai, UAE", "price_per_night": 380.00, "available_rooms": 6, "rating": 4.9},
        {"name": "Downtown Dubai Hotel", "location": "Dubai, UAE", "price_per_night": 140.00, "available_rooms": 30, "rating": 3.9},
    ],
    "london": [
        {"name": "The Shard Hotel", "location": "London, UK", "price_per_night": 320.00, "available_rooms": 7, "rating": 4.6},
        {"name": "Covent Garden Inn", "location": "London, UK", "price_per_night": 115.00, "available_rooms": 14, "rating": 3.9},
        {"name": "London Bridge Hotel", "location": "London, UK", "price_per_night": 95.00, "available_rooms": 25, "rating": 3.7},
    ],
    "paris": [
        {"name": "Le Grand Hotel Paris", "location": "Paris, France", "price_per_night": 270.00, "available_rooms": 8, "rating": 4.7},
        {"name": "Champs Elysees Hotel", "location": "Paris, France", "price_per_night": 190.00, "available_rooms": 12, "rating": 4.2},
    ],
    "tokyo": [
        {"name": "Park Hyatt Tokyo", "location": "Tokyo, Japan", "price_per_night": 400.00, "available_rooms": 3, "rating": 4.9},
        {"name": "Shibuya Sky Hotel", "location": "Tokyo, Japan", "price_per_night": 180.00, "available_rooms": 20, "rating": 4.3},
        {"name": "Tokyo Bay Resort", "location": "Tokyo, Japan", "price_per_night": 150.00, "available_rooms": 15, "rating": 4.1},
    ],
    "rome": [
        {"name": "Hotel de Russie Rome", "location": "Rome, Italy", "price_per_night": 290.00, "available_rooms": 5, "rating": 4.7},
        {"name": "Colosseum View Hotel", "location": "Rome, Italy", "price_per_night": 160.00, "available_rooms": 12, "rating": 4.2},
    ],
}

SUPPLIER_D_CATALOG: dict[str, list[dict]] = {
    "cairo": [
        {"name": "Pyramids View Resort", "location": "Cairo, Egypt", "price_per_night": 90.00, "available_rooms": 12, "rating": 4.2},
        {"name": "Nile Boutique Hotel", "location": "Cairo, Egypt", "price_per_night": 70.00, "available_rooms": 8, "rating": 3.8},
    ],
    "dubai": [
        {"name": "JBR Beach Resort", "location": "Dubai, UAE", "price_per_night": 155.00, "available_rooms": 16, "rating": 4.1},
        {"name": "Dubai Marina Hotel", "location": "Dubai, UAE", "price_per_night": 130.00, "available_rooms": 22, "rating": 3.8},
    ],
    "london": [
        {"name": "The Ritz London", "location": "London, UK", "price_per_night": 370.00, "available_rooms": 7, "rating": 4.8},
        {"name": "Hyde Park Hotel", "location": "London, UK", "price_per_night": 175.00, "available_rooms": 10, "rating": 4.2},
        {"name": "Westminster Palace Hotel", "location": "London, UK", "price_per_night": 200.00, "available_rooms": 6, "rating": 4.4},
    ],
    "paris": [
        {"name": "Eiffel Tower View Hotel", "location": "Paris, France", "price_per_night": 195.00, "available_rooms": 16, "rating": 4.4},
        {"name": "Louvre Palace Hotel", "location": "Paris, France", "price_per_night": 240.00, "available_rooms": 9, "rating": 4.5},
    ],
    "new york": [
        {"name": "Times Square Hotel", "location": "New York, USA", "price_per_night": 210.00, "available_rooms": 30, "rating": 4.2},
        {"name": "Central Park Hotel", "location": "New York, USA", "price_per_night": 280.00, "available_rooms": 12, "rating": 4.6},
    ],
    "barcelona": [
        {"name": "Hotel Arts Barcelona", "location": "Barcelona, Spain", "price_per_night": 220.00, "available_rooms": 8, "rating": 4.5},
        {"name": "Gothic Quarter Hotel", "location": "Barcelona, Spain", "price_per_night": 120.00, "available_rooms": 18, "rating": 4.0},
        {"name": "Sagrada Familia Hotel", "location": "Barcelona, Spain", "price_per_night": 95.00, "available_rooms": 24, "rating": 3.7},
    ],
}
