"""
Static French vocabulary and exception tables.

Plain data only: every entry is a tuple of (text, translation[, tags]).
`motamot.languages.french.lexicon` turns these into immutable Word objects
once per process.
"""

# ---------------------------------------------------------------------------
# Base words by category
# ---------------------------------------------------------------------------

SUBJECTS = (
    ("Je", "I"),
    ("Tu", "You"),
    ("Il", "He"),
    ("Elle", "She"),
    ("Nous", "We"),
    ("Vous", "You (pl)"),
    ("Ils", "They (m)"),
    ("Elles", "They (f)"),
)

ARTICLES = (
    ("le", "the (m)"),
    ("la", "the (f)"),
    ("l'", "the (vowel)"),
    ("un", "a (m)"),
    ("une", "a (f)"),
    ("les", "the (pl)"),
    ("des", "some"),
)

POSSESSIVES = (
    ("mon", "my (m)"),
    ("ma", "my (f)"),
    ("mes", "my (pl)"),
    ("ton", "your (m)"),
    ("ta", "your (f)"),
    ("tes", "your (pl)"),
    ("son", "his/her (m)"),
    ("sa", "his/her (f)"),
    ("ses", "his/her (pl)"),
    ("notre", "our"),
    ("nos", "our (pl)"),
    ("votre", "your (formal)"),
    ("vos", "your (pl form)"),
    ("leur", "their"),
    ("leurs", "their (pl)"),
)

PREPOSITIONS = (
    ("à", "to/at"),
    ("de", "of/from/about"),
    ("avec", "with"),
    ("pour", "for"),
    ("dans", "in"),
    ("sur", "on"),
    ("sous", "under"),
    ("chez", "at place of"),
    ("sans", "without"),
    ("avant", "before"),
    ("après", "after"),
    ("pendant", "during"),
    ("jusque", "until/up to"),
)

CONNECTORS = (
    ("et", "and"),
    ("mais", "but"),
    ("ou", "or"),
    ("car", "because (formal)"),
    ("parce que", "because"),
    ("à cause de", "because of (negative)"),
    ("grâce à", "thanks to (positive)"),
    ("donc", "therefore/so"),
    ("alors", "then/so"),
    ("puisque", "since/as"),
    ("si", "if"),
    ("quand", "when"),
    ("pendant que", "while"),
    ("que", "that"),
)

NEGATIONS = (
    ("ne", "not (part 1)"),
    ("pas", "not (part 2)"),
    ("jamais", "never"),
    ("plus", "anymore"),
    ("rien", "nothing"),
)

# Object and reflexive pronouns that take part in elision (m'a, t'aime, s'appelle)
OBJECTS = (
    ("me", "me/myself"),
    ("te", "you/yourself"),
    ("se", "himself/herself"),
    ("ce", "it/this"),
)

# ---------------------------------------------------------------------------
# Topic pools: infinitives, irregular past participles, nouns, adjectives
# ---------------------------------------------------------------------------

TOPIC_POOLS = {
    "daily_life": {
        "infinitives": (
            ("manger", "to eat"),
            ("regarder", "to watch"),
            ("dormir", "to sleep"),
            ("parler", "to speak"),
        ),
        "participles": (
            ("dormi", "slept"),
        ),
        "nouns": (
            ("chat", "cat", ("m", "mutable")),
            ("chien", "dog", ("m", "mutable")),
            ("télé", "TV", ("f",)),
            ("maison", "house", ("f",)),
            ("voiture", "car", ("f",)),
            ("ami", "friend", ("m", "mutable")),
            ("famille", "family", ("f",)),
            ("travail", "work", ("m",)),
            ("école", "school", ("f",)),
        ),
        "adjectives": (
            ("rapide", "fast"),
            ("fatigué", "tired"),
            ("rouge", "red"),
            ("heureux", "happy"),
            ("grand", "big"),
            ("petit", "small"),
        ),
    },
    "food_drink": {
        "infinitives": (
            ("cuisiner", "to cook"),
            ("boire", "to drink"),
            ("commander", "to order"),
            ("dîner", "to have dinner"),
            ("prendre", "to take"),
            ("commencer", "to start"),
        ),
        "participles": (
            ("bu", "drunk"),
            ("pris", "taken"),
        ),
        "nouns": (
            ("pizza", "pizza", ("f",)),
            ("café", "coffee", ("m",)),
            ("pomme", "apple", ("f",)),
            ("eau", "water", ("f",)),
            ("restaurant", "restaurant", ("m",)),
            ("pain", "bread", ("m",)),
            ("lait", "milk", ("m",)),
        ),
        "adjectives": (
            ("délicieux", "delicious"),
            ("chaud", "hot"),
            ("frais", "fresh"),
            ("épicé", "spicy"),
            ("blanc", "white"),
        ),
    },
    "travel": {
        "infinitives": (
            ("voyager", "to travel"),
            ("visiter", "to visit"),
            ("partir", "to leave"),
            ("marcher", "to walk"),
            ("payer", "to pay"),
        ),
        "participles": (
            ("parti", "left"),
        ),
        "nouns": (
            ("train", "train", ("m",)),
            ("avion", "plane", ("m",)),
            ("plage", "beach", ("f",)),
            ("paris", "Paris", ("m",)),
            ("hôtel", "hotel", ("m",)),
            ("monde", "world", ("m",)),
            ("pays", "country", ("m",)),
            ("cheval", "horse", ("m",)),
        ),
        "adjectives": (
            ("beau", "beautiful"),
            ("loin", "far"),
            ("grand", "big"),
            ("nouveau", "new"),
            ("vieux", "old"),
        ),
    },
    "school": {
        "infinitives": (
            ("étudier", "to study"),
            ("apprendre", "to learn"),
            ("écrire", "to write"),
            ("lire", "to read"),
            ("écouter", "to listen"),
            ("nettoyer", "to clean"),
        ),
        "participles": (
            ("appris", "learned"),
            ("écrit", "written"),
            ("lu", "read"),
        ),
        "nouns": (
            ("livre", "book", ("m",)),
            ("leçon", "lesson", ("f",)),
            ("stylo", "pen", ("m",)),
            ("examen", "exam", ("m",)),
            ("professeur", "teacher", ("m",)),
            ("classe", "class", ("f",)),
            ("écolier", "pupil", ("m", "mutable")),
        ),
        "adjectives": (
            ("difficile", "difficult"),
            ("facile", "easy"),
            ("intelligent", "smart"),
        ),
    },
    "fantasy": {
        "infinitives": (
            ("attaquer", "to attack"),
            ("voler", "to fly"),
            ("disparaître", "to disappear"),
            ("préparer", "to prepare"),
        ),
        "participles": (
            ("disparu", "disappeared"),
        ),
        "nouns": (
            ("dragon", "dragon", ("m",)),
            ("sorcier", "wizard", ("m", "mutable")),
            ("château", "castle", ("m",)),
            ("potion", "potion", ("f",)),
            ("épée", "sword", ("f",)),
        ),
        "adjectives": (
            ("magique", "magical"),
            ("dangereux", "dangerous"),
            ("invisible", "invisible"),
            ("puissant", "powerful"),
        ),
    },
    "custom": {},
}

# ---------------------------------------------------------------------------
# Exception tables
# ---------------------------------------------------------------------------

# Nouns whose feminine is not produced by the suffix rules
IRREGULAR_NOUN_FEMININES = {
    "chat": "chatte",
    "chien": "chienne",
    "sorcier": "sorcière",
}

# lemma (masculine singular) -> (feminine singular, masculine plural, feminine plural)
IRREGULAR_ADJECTIVES = {
    "beau": ("belle", "beaux", "belles"),
    "nouveau": ("nouvelle", "nouveaux", "nouvelles"),
    "vieux": ("vieille", "vieux", "vieilles"),
    "frais": ("fraîche", "frais", "fraîches"),
    "blanc": ("blanche", "blancs", "blanches"),
    "heureux": ("heureuse", "heureux", "heureuses"),
    "délicieux": ("délicieuse", "délicieux", "délicieuses"),
    "dangereux": ("dangereuse", "dangereux", "dangereuses"),
}

# Fixed present-tense paradigms, one form per person
AUXILIARY_PARADIGMS = {
    "avoir": {
        "translation": "to have (Aux)",
        "past_participle": ("eu", "had"),
        "forms": (
            ("ai", "have (Je)", ("Je",)),
            ("as", "have (Tu)", ("Tu",)),
            ("a", "has (Il/Elle)", ("Il", "Elle")),
            ("avons", "have (Nous)", ("Nous",)),
            ("avez", "have (Vous)", ("Vous",)),
            ("ont", "have (Ils/Elles)", ("Ils", "Elles")),
        ),
    },
    "être": {
        "translation": "to be (Aux)",
        "past_participle": ("été", "been"),
        "forms": (
            ("suis", "am (Je)", ("Je",)),
            ("es", "are (Tu)", ("Tu",)),
            ("est", "is (Il/Elle)", ("Il", "Elle")),
            ("sommes", "are (Nous)", ("Nous",)),
            ("êtes", "are (Vous)", ("Vous",)),
            ("sont", "are (Ils/Elles)", ("Ils", "Elles")),
        ),
    },
    "aller": {
        "translation": "to go (Aux)",
        "past_participle": ("allé", "gone"),
        "forms": (
            ("vais", "am going (Je)", ("Je",)),
            ("vas", "are going (Tu)", ("Tu",)),
            ("va", "is going (Il/Elle)", ("Il", "Elle")),
            ("allons", "are going (Nous)", ("Nous",)),
            ("allez", "are going (Vous)", ("Vous",)),
            ("vont", "are going (Ils/Elles)", ("Ils", "Elles")),
        ),
    },
}

# Person tags for the five generated forms of a regular -er verb
REGULAR_PERSON_TAGS = (
    ("Je", "Il", "Elle"),
    ("Tu",),
    ("Nous",),
    ("Vous",),
    ("Ils", "Elles"),
)

REGULAR_PERSON_LABELS = ("Je/Il", "Tu", "Nous", "Vous", "Ils/Elles")
