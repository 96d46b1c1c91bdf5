"""Built-in themed word pool and solution-word list."""

from __future__ import annotations

from models import WordEntry

_RAW_POOL: list[tuple[str, str, str]] = [
    # Nature
    ("FOREST", "Dense stand of trees", "Nature"),
    ("RIVER", "Flowing body of fresh water", "Nature"),
    ("MEADOW", "Grassy field, often full of wildflowers", "Nature"),
    ("GLACIER", "Slow-moving mass of ice", "Nature"),
    ("VOLCANO", "Mountain that may erupt", "Nature"),
    ("ISLAND", "Land surrounded by water", "Nature"),
    ("DESERT", "Dry region with little rainfall", "Nature"),
    ("CANYON", "Deep gorge carved by a river", "Nature"),
    ("LAGOON", "Shallow body of water cut off by a reef", "Nature"),
    ("THUNDER", "Sound that follows lightning", "Nature"),
    ("RAINBOW", "Arc of colours after a shower", "Nature"),
    ("BREEZE", "Gentle wind", "Nature"),
    ("PEBBLE", "Small smooth stone", "Nature"),
    ("TIDE", "Twice-daily rise and fall of the sea", "Nature"),
    # Animals
    ("OTTER", "Playful river mammal", "Animals"),
    ("EAGLE", "Large bird of prey", "Animals"),
    ("DOLPHIN", "Intelligent marine mammal", "Animals"),
    ("BADGER", "Burrowing animal with a striped face", "Animals"),
    ("SPARROW", "Small brown songbird", "Animals"),
    ("TORTOISE", "Slow reptile with a domed shell", "Animals"),
    ("HEDGEHOG", "Spiny nocturnal mammal", "Animals"),
    ("SALMON", "Fish that swims upstream to spawn", "Animals"),
    ("PANTHER", "Big black cat", "Animals"),
    ("LIZARD", "Scaly reptile that basks in the sun", "Animals"),
    ("BEAVER", "Dam-building rodent", "Animals"),
    ("OWL", "Nocturnal bird that hoots", "Animals"),
    ("ANT", "Tiny social insect", "Animals"),
    ("RAVEN", "Large black corvid", "Animals"),
    # Food
    ("BREAD", "Baked loaf", "Food"),
    ("CHEESE", "Dairy product aged in wheels", "Food"),
    ("TOMATO", "Red fruit often treated as a vegetable", "Food"),
    ("ONION", "Bulb that can make you cry", "Food"),
    ("PRETZEL", "Twisted salted snack", "Food"),
    ("NOODLE", "Long strip of pasta", "Food"),
    ("LEMON", "Sour yellow citrus", "Food"),
    ("APRICOT", "Small orange stone fruit", "Food"),
    ("PEPPER", "Spice ground from peppercorns", "Food"),
    ("HONEY", "Sweet product of bees", "Food"),
    ("OLIVE", "Small fruit pressed for oil", "Food"),
    ("PANCAKE", "Flat cake cooked on a griddle", "Food"),
    ("TEA", "Brewed leaf drink", "Food"),
    # Travel
    ("TRAIN", "Rail vehicle", "Travel"),
    ("AIRPORT", "Place where planes take off", "Travel"),
    ("PASSPORT", "Document needed to cross borders", "Travel"),
    ("SUITCASE", "Luggage with a handle", "Travel"),
    ("HARBOR", "Sheltered port for ships", "Travel"),
    ("TICKET", "Proof of paid fare", "Travel"),
    ("JOURNEY", "Long trip", "Travel"),
    ("COMPASS", "Instrument that points north", "Travel"),
    ("HOTEL", "Place to stay overnight", "Travel"),
    ("MAP", "Chart of an area", "Travel"),
    ("BRIDGE", "Structure spanning a river", "Travel"),
    ("TUNNEL", "Passage through a mountain", "Travel"),
    # Music
    ("PIANO", "Keyboard instrument with hammers", "Music"),
    ("GUITAR", "Six-stringed instrument", "Music"),
    ("VIOLIN", "Bowed string instrument", "Music"),
    ("TRUMPET", "Brass instrument with valves", "Music"),
    ("MELODY", "Tune", "Music"),
    ("RHYTHM", "Pattern of beats", "Music"),
    ("CHORUS", "Repeated part of a song", "Music"),
    ("OPERA", "Drama set to music", "Music"),
    ("DRUM", "Percussion instrument", "Music"),
    ("ORCHESTRA", "Large ensemble of musicians", "Music"),
    ("TENOR", "High male singing voice", "Music"),
    # Home
    ("WINDOW", "Glass opening in a wall", "Home"),
    ("KITCHEN", "Room where meals are cooked", "Home"),
    ("LANTERN", "Portable lamp", "Home"),
    ("CANDLE", "Wax light source", "Home"),
    ("BLANKET", "Warm bed covering", "Home"),
    ("CHIMNEY", "Flue for smoke", "Home"),
    ("GARDEN", "Plot for growing flowers", "Home"),
    ("LADDER", "Climbing tool with rungs", "Home"),
    ("MIRROR", "Reflective glass", "Home"),
    ("PILLOW", "Soft head rest", "Home"),
    ("DOOR", "Hinged entrance", "Home"),
    ("ATTIC", "Room under the roof", "Home"),
    # Science
    ("ATOM", "Smallest unit of an element", "Science"),
    ("PLANET", "Body orbiting a star", "Science"),
    ("MAGNET", "Object that attracts iron", "Science"),
    ("ENERGY", "Capacity to do work", "Science"),
    ("GRAVITY", "Force that keeps us grounded", "Science"),
    ("CRYSTAL", "Solid with a regular lattice", "Science"),
    ("OXYGEN", "Element we breathe", "Science"),
    ("PROTON", "Positive particle in a nucleus", "Science"),
    ("COMET", "Icy body with a glowing tail", "Science"),
    ("ORBIT", "Path around a planet or star", "Science"),
    ("NEUTRON", "Neutral nuclear particle", "Science"),
    ("TELESCOPE", "Instrument for viewing distant objects", "Science"),
]

WORD_POOL: tuple[WordEntry, ...] = tuple(
    WordEntry(word=word, clue=clue, category=category)
    for word, clue, category in _RAW_POOL
)

SOLUTION_WORDS: tuple[str, ...] = (
    "SUNRISE",
    "HARVEST",
    "LANTERN",
    "TREASURE",
    "STARLIGHT",
    "ADVENTURE",
    "MOONLIGHT",
    "WANDERER",
    "PARADISE",
    "HORIZON",
    "SNOWFALL",
    "SEASHORE",
)


def get_word_pool() -> list[WordEntry]:
    """Return a fresh list of the built-in word entries."""
    return list(WORD_POOL)


def categories() -> list[str]:
    """Distinct categories in pool order."""
    seen: list[str] = []
    for entry in WORD_POOL:
        if entry.category not in seen:
            seen.append(entry.category)
    return seen
