# ============================================================
# core/tables.py - Static reference tables
#
#   FALLBACK_SIGNS   procedural motion descriptions per gloss
#   FINGERSPELLING   26-letter manual alphabet handshapes
#
# Motion flags beyond the modifier set (claw, y_shape, ...) are
# hints for richer renderers and are ignored by the generator.
# ============================================================

FALLBACK_SIGNS = {
    # ── greetings ─────────────────────────────────────────
    "HELLO": {
        "description": "Wave hand at forehead level, palm facing out",
        "category":    "greetings",
        "color":       "#4CAF50",
        "animation": {
            "right_hand": {"start": (0.5, 0.3, 0.0), "end": (0.6, 0.5, 0.1), "wave": True},
            "expression": "smile",
            "duration":   1.5,
        },
    },
    "GOODBYE": {
        "description": "Wave hand downward, palm facing down",
        "category":    "greetings",
        "color":       "#2196F3",
        "animation": {
            "right_hand": {"start": (0.4, 0.5, 0.0), "end": (0.4, 0.2, 0.0), "wave": True},
            "expression": "neutral",
            "duration":   2.0,
        },
    },
    "HI": {
        "description": "Quick wave at shoulder height",
        "category":    "greetings",
        "color":       "#4CAF50",
        "animation": {
            "right_hand": {"start": (0.5, 0.3, 0.0), "end": (0.6, 0.4, 0.1), "wave": True},
            "expression": "smile",
            "duration":   1.0,
        },
    },

    # ── common ────────────────────────────────────────────
    "THANK YOU": {
        "description": "Hand moves from chin outward, palm up",
        "category":    "common",
        "color":       "#FF9800",
        "animation": {
            "right_hand": {"start": (0.3, 0.4, 0.1), "end": (0.4, 0.3, 0.2)},
            "expression": "smile",
            "duration":   1.5,
        },
    },
    "PLEASE": {
        "description": "Flat hand circles on chest",
        "category":    "common",
        "color":       "#9C27B0",
        "animation": {
            "right_hand": {"start": (0.25, 0.2, 0.1), "end": (0.25, 0.15, 0.1), "circular": True},
            "expression": "neutral",
            "duration":   1.5,
        },
    },
    "SORRY": {
        "description": "Fist circles on chest",
        "category":    "common",
        "color":       "#F44336",
        "animation": {
            "right_hand": {"start": (0.25, 0.2, 0.1), "end": (0.25, 0.15, 0.1), "circular": True, "fist": True},
            "expression": "sad",
            "duration":   1.8,
        },
    },
    "YES": {
        "description": "Fist nods up and down like a head nodding",
        "category":    "common",
        "color":       "#4CAF50",
        "animation": {
            "right_hand": {"start": (0.4, 0.3, 0.1), "end": (0.4, 0.25, 0.1), "nod": True, "fist": True},
            "expression": "neutral",
            "duration":   1.2,
        },
    },
    "NO": {
        "description": "Index and middle finger tap thumb",
        "category":    "common",
        "color":       "#F44336",
        "animation": {
            "right_hand": {"start": (0.4, 0.3, 0.1), "end": (0.4, 0.3, 0.1), "snap": True},
            "expression": "neutral",
            "duration":   1.0,
        },
    },

    # ── emergency ─────────────────────────────────────────
    "HELP": {
        "description": "Thumbs-up on palm, lift up together",
        "category":    "emergency",
        "color":       "#FF5722",
        "animation": {
            "right_hand": {"start": (0.3, 0.2, 0.1), "end": (0.3, 0.35, 0.1), "thumbs_up": True},
            "left_hand": {"start": (0.2, 0.2, 0.1), "end": (0.2, 0.35, 0.1), "palm_up": True},
            "expression": "concerned",
            "duration":   2.0,
        },
    },

    # ── questions ─────────────────────────────────────────
    "WHAT": {
        "description": "Palms up, shake side to side",
        "category":    "questions",
        "color":       "#00BCD4",
        "animation": {
            "right_hand": {"start": (0.4, 0.25, 0.15), "end": (0.45, 0.25, 0.15), "shake": True, "palm_up": True},
            "left_hand": {"start": (0.1, 0.25, 0.15), "end": (0.05, 0.25, 0.15), "shake": True, "palm_up": True},
            "expression": "questioning",
            "duration":   1.5,
        },
    },
    "WHERE": {
        "description": "Index finger shakes side to side",
        "category":    "questions",
        "color":       "#00BCD4",
        "animation": {
            "right_hand": {"start": (0.4, 0.3, 0.2), "end": (0.45, 0.3, 0.2), "shake": True, "pointing": True},
            "expression": "questioning",
            "duration":   1.3,
        },
    },
    "WHEN": {
        "description": "Index fingers circle each other",
        "category":    "questions",
        "color":       "#00BCD4",
        "animation": {
            "right_hand": {"start": (0.35, 0.3, 0.15), "end": (0.35, 0.3, 0.15), "circular": True, "pointing": True},
            "left_hand": {"start": (0.15, 0.3, 0.15), "end": (0.15, 0.3, 0.15), "circular": True, "pointing": True},
            "expression": "questioning",
            "duration":   1.8,
        },
    },
    "WHY": {
        "description": "Touch forehead, pull away into Y handshape",
        "category":    "questions",
        "color":       "#00BCD4",
        "animation": {
            "right_hand": {"start": (0.35, 0.5, 0.05), "end": (0.4, 0.4, 0.15), "y_shape": True},
            "expression": "questioning",
            "duration":   1.5,
        },
    },
    "HOW": {
        "description": "Fists together, roll outward",
        "category":    "questions",
        "color":       "#00BCD4",
        "animation": {
            "right_hand": {"start": (0.35, 0.25, 0.1), "end": (0.4, 0.25, 0.15), "roll": True, "fist": True},
            "left_hand": {"start": (0.15, 0.25, 0.1), "end": (0.1, 0.25, 0.15), "roll": True, "fist": True},
            "expression": "questioning",
            "duration":   1.5,
        },
    },
    "WHO": {
        "description": "Index finger circles near mouth",
        "category":    "questions",
        "color":       "#00BCD4",
        "animation": {
            "right_hand": {"start": (0.3, 0.4, 0.1), "end": (0.3, 0.4, 0.1), "circular": True, "pointing": True},
            "expression": "questioning",
            "duration":   1.5,
        },
    },

    # ── pronouns ──────────────────────────────────────────
    "I": {
        "description": "Point to chest with index finger",
        "category":    "pronouns",
        "color":       "#607D8B",
        "animation": {
            "right_hand": {"start": (0.4, 0.3, 0.2), "end": (0.25, 0.2, 0.1), "pointing": True},
            "expression": "neutral",
            "duration":   0.8,
        },
    },
    "YOU": {
        "description": "Point forward with index finger",
        "category":    "pronouns",
        "color":       "#607D8B",
        "animation": {
            "right_hand": {"start": (0.3, 0.25, 0.1), "end": (0.4, 0.3, 0.25), "pointing": True},
            "expression": "neutral",
            "duration":   0.8,
        },
    },
    "WE": {
        "description": "Index finger arcs from one shoulder to other",
        "category":    "pronouns",
        "color":       "#607D8B",
        "animation": {
            "right_hand": {"start": (0.45, 0.3, 0.1), "end": (0.05, 0.3, 0.1), "arc": True, "pointing": True},
            "expression": "neutral",
            "duration":   1.2,
        },
    },
    "THEY": {
        "description": "Point to the side and sweep",
        "category":    "pronouns",
        "color":       "#607D8B",
        "animation": {
            "right_hand": {"start": (0.5, 0.3, 0.15), "end": (0.6, 0.3, 0.15), "sweep": True, "pointing": True},
            "expression": "neutral",
            "duration":   1.0,
        },
    },

    # ── emotions ──────────────────────────────────────────
    "HAPPY": {
        "description": "Both hands brush up chest multiple times",
        "category":    "emotions",
        "color":       "#FFEB3B",
        "animation": {
            "right_hand": {"start": (0.35, 0.15, 0.1), "end": (0.35, 0.3, 0.1), "brush_up": True},
            "left_hand": {"start": (0.15, 0.15, 0.1), "end": (0.15, 0.3, 0.1), "brush_up": True},
            "expression": "happy",
            "duration":   1.8,
        },
    },
    "SAD": {
        "description": "Both hands move down face",
        "category":    "emotions",
        "color":       "#3F51B5",
        "animation": {
            "right_hand": {"start": (0.35, 0.45, 0.05), "end": (0.35, 0.3, 0.05)},
            "left_hand": {"start": (0.15, 0.45, 0.05), "end": (0.15, 0.3, 0.05)},
            "expression": "sad",
            "duration":   1.8,
        },
    },
    "ANGRY": {
        "description": "Claw hands pull down from face",
        "category":    "emotions",
        "color":       "#F44336",
        "animation": {
            "right_hand": {"start": (0.35, 0.45, 0.08), "end": (0.35, 0.3, 0.12), "claw": True},
            "left_hand": {"start": (0.15, 0.45, 0.08), "end": (0.15, 0.3, 0.12), "claw": True},
            "expression": "angry",
            "duration":   1.5,
        },
    },
    "LOVE": {
        "description": "Cross arms over chest in hug",
        "category":    "emotions",
        "color":       "#E91E63",
        "animation": {
            "right_hand": {"start": (0.5, 0.25, 0.1), "end": (0.1, 0.2, 0.1), "cross_body": True},
            "left_hand": {"start": (0.0, 0.25, 0.1), "end": (0.4, 0.2, 0.1), "cross_body": True},
            "expression": "loving",
            "duration":   2.0,
        },
    },
    "I LOVE YOU": {
        "description": "ILY handshape - pinky, index, and thumb extended",
        "category":    "emotions",
        "color":       "#E91E63",
        "animation": {
            "right_hand": {"start": (0.4, 0.25, 0.15), "end": (0.45, 0.35, 0.2), "ily_shape": True},
            "expression": "loving",
            "duration":   2.0,
        },
    },

    # ── actions ───────────────────────────────────────────
    "EAT": {
        "description": "Bunched fingers tap mouth",
        "category":    "actions",
        "color":       "#795548",
        "animation": {
            "right_hand": {"start": (0.35, 0.35, 0.15), "end": (0.33, 0.42, 0.08), "tap": True, "bunched": True},
            "expression": "neutral",
            "duration":   1.5,
        },
    },
    "DRINK": {
        "description": "C-hand tips to mouth",
        "category":    "actions",
        "color":       "#795548",
        "animation": {
            "right_hand": {"start": (0.35, 0.3, 0.15), "end": (0.33, 0.4, 0.1), "c_shape": True, "tilt": True},
            "expression": "neutral",
            "duration":   1.5,
        },
    },
    "SLEEP": {
        "description": "Hand pulls down over face, eyes close",
        "category":    "actions",
        "color":       "#9E9E9E",
        "animation": {
            "right_hand": {"start": (0.25, 0.5, 0.05), "end": (0.25, 0.35, 0.05)},
            "expression": "sleeping",
            "duration":   2.0,
        },
    },
    "WALK": {
        "description": "Two fingers walk forward on palm",
        "category":    "actions",
        "color":       "#8BC34A",
        "animation": {
            "right_hand": {"start": (0.3, 0.2, 0.1), "end": (0.35, 0.2, 0.15), "walking": True},
            "left_hand": {"start": (0.2, 0.2, 0.1), "end": (0.2, 0.2, 0.1), "palm_up": True},
            "expression": "neutral",
            "duration":   2.0,
        },
    },

    # ── education ─────────────────────────────────────────
    "LEARN": {
        "description": "Hand grabs from head, pulls to flat hand",
        "category":    "education",
        "color":       "#3F51B5",
        "animation": {
            "right_hand": {"start": (0.35, 0.5, 0.05), "end": (0.2, 0.25, 0.1), "grab": True},
            "left_hand": {"start": (0.15, 0.25, 0.1), "end": (0.15, 0.25, 0.1), "flat": True},
            "expression": "focused",
            "duration":   1.8,
        },
    },

    # ── communication ─────────────────────────────────────
    "UNDERSTAND": {
        "description": "Index finger flicks up near forehead",
        "category":    "communication",
        "color":       "#009688",
        "animation": {
            "right_hand": {"start": (0.35, 0.45, 0.05), "end": (0.38, 0.5, 0.08), "flick": True, "pointing": True},
            "expression": "understanding",
            "duration":   1.2,
        },
    },
    "KNOW": {
        "description": "Fingertips tap forehead",
        "category":    "communication",
        "color":       "#009688",
        "animation": {
            "right_hand": {"start": (0.35, 0.45, 0.1), "end": (0.35, 0.5, 0.05), "tap": True},
            "expression": "neutral",
            "duration":   1.0,
        },
    },
    "THINK": {
        "description": "Index finger touches forehead",
        "category":    "communication",
        "color":       "#009688",
        "animation": {
            "right_hand": {"start": (0.38, 0.4, 0.12), "end": (0.35, 0.5, 0.05), "pointing": True},
            "expression": "thinking",
            "duration":   1.2,
        },
    },

    # ── family ────────────────────────────────────────────
    "MOTHER": {
        "description": "Thumb of open hand taps chin",
        "category":    "family",
        "color":       "#E91E63",
        "animation": {
            "right_hand": {"start": (0.3, 0.38, 0.1), "end": (0.3, 0.42, 0.08), "tap": True, "open_hand": True},
            "expression": "warm",
            "duration":   1.3,
        },
    },
    "FATHER": {
        "description": "Thumb of open hand taps forehead",
        "category":    "family",
        "color":       "#2196F3",
        "animation": {
            "right_hand": {"start": (0.3, 0.48, 0.1), "end": (0.3, 0.52, 0.08), "tap": True, "open_hand": True},
            "expression": "warm",
            "duration":   1.3,
        },
    },

    # ── relationships ─────────────────────────────────────
    "FRIEND": {
        "description": "Index fingers hook and switch positions",
        "category":    "relationships",
        "color":       "#FF9800",
        "animation": {
            "right_hand": {"start": (0.35, 0.25, 0.15), "end": (0.15, 0.25, 0.15), "hook": True},
            "left_hand": {"start": (0.15, 0.25, 0.15), "end": (0.35, 0.25, 0.15), "hook": True},
            "expression": "friendly",
            "duration":   1.5,
        },
    },

    # ── time ──────────────────────────────────────────────
    "NOW": {
        "description": "Both Y-hands drop down",
        "category":    "time",
        "color":       "#FFC107",
        "animation": {
            "right_hand": {"start": (0.35, 0.3, 0.12), "end": (0.35, 0.22, 0.12), "y_shape": True},
            "left_hand": {"start": (0.15, 0.3, 0.12), "end": (0.15, 0.22, 0.12), "y_shape": True},
            "expression": "neutral",
            "duration":   1.0,
        },
    },
    "LATER": {
        "description": "L-hand rotates forward",
        "category":    "time",
        "color":       "#FFC107",
        "animation": {
            "right_hand": {"start": (0.35, 0.3, 0.1), "end": (0.4, 0.3, 0.15), "l_shape": True, "rotate": True},
            "expression": "neutral",
            "duration":   1.5,
        },
    },
    "BEFORE": {
        "description": "One hand moves back toward body",
        "category":    "time",
        "color":       "#FFC107",
        "animation": {
            "right_hand": {"start": (0.4, 0.25, 0.2), "end": (0.35, 0.25, 0.1)},
            "expression": "neutral",
            "duration":   1.2,
        },
    },
    "AFTER": {
        "description": "One hand moves forward from other hand",
        "category":    "time",
        "color":       "#FFC107",
        "animation": {
            "right_hand": {"start": (0.3, 0.25, 0.1), "end": (0.4, 0.25, 0.2)},
            "left_hand": {"start": (0.2, 0.25, 0.1), "end": (0.2, 0.25, 0.1)},
            "expression": "neutral",
            "duration":   1.2,
        },
    },

    # ── places ────────────────────────────────────────────
    "HOME": {
        "description": "Bunched fingertips touch cheek then chin",
        "category":    "places",
        "color":       "#8D6E63",
        "animation": {
            "right_hand": {"start": (0.32, 0.42, 0.05), "end": (0.32, 0.38, 0.05), "bunched": True, "tap": True},
            "expression": "content",
            "duration":   1.5,
        },
    },
    "WORK": {
        "description": "S-hand taps on other S-hand",
        "category":    "places",
        "color":       "#607D8B",
        "animation": {
            "right_hand": {"start": (0.35, 0.28, 0.12), "end": (0.28, 0.25, 0.1), "s_shape": True, "tap": True},
            "left_hand": {"start": (0.2, 0.25, 0.1), "end": (0.2, 0.25, 0.1), "s_shape": True},
            "expression": "focused",
            "duration":   1.5,
        },
    },
    "SCHOOL": {
        "description": "Clap hands twice",
        "category":    "places",
        "color":       "#FF5722",
        "animation": {
            "right_hand": {"start": (0.35, 0.25, 0.12), "end": (0.25, 0.25, 0.1), "clap": True},
            "left_hand": {"start": (0.15, 0.25, 0.1), "end": (0.25, 0.25, 0.1), "clap": True},
            "expression": "neutral",
            "duration":   1.5,
        },
    },

    # ── objects ───────────────────────────────────────────
    "BOOK": {
        "description": "Palms together open like a book",
        "category":    "objects",
        "color":       "#795548",
        "animation": {
            "right_hand": {"start": (0.3, 0.25, 0.1), "end": (0.35, 0.25, 0.12), "palm_in": True, "open": True},
            "left_hand": {"start": (0.2, 0.25, 0.1), "end": (0.15, 0.25, 0.12), "palm_in": True, "open": True},
            "expression": "neutral",
            "duration":   1.5,
        },
    },
    "WATER": {
        "description": "W-hand taps chin",
        "category":    "objects",
        "color":       "#03A9F4",
        "animation": {
            "right_hand": {"start": (0.3, 0.35, 0.12), "end": (0.3, 0.4, 0.08), "w_shape": True, "tap": True},
            "expression": "neutral",
            "duration":   1.2,
        },
    },
    "FOOD": {
        "description": "Bunched fingers tap lips",
        "category":    "objects",
        "color":       "#FF9800",
        "animation": {
            "right_hand": {"start": (0.32, 0.38, 0.12), "end": (0.32, 0.42, 0.08), "bunched": True, "tap": True},
            "expression": "neutral",
            "duration":   1.2,
        },
    },
    "PHONE": {
        "description": "Y-hand at ear",
        "category":    "objects",
        "color":       "#9C27B0",
        "animation": {
            "right_hand": {"start": (0.4, 0.35, 0.1), "end": (0.42, 0.45, 0.02), "y_shape": True},
            "expression": "neutral",
            "duration":   1.5,
        },
    },
    "COMPUTER": {
        "description": "C-hand moves up arm",
        "category":    "objects",
        "color":       "#607D8B",
        "animation": {
            "right_hand": {"start": (0.15, 0.2, 0.1), "end": (0.25, 0.25, 0.1), "c_shape": True},
            "left_hand": {"start": (0.1, 0.25, 0.05), "end": (0.25, 0.25, 0.05), "arm_extended": True},
            "expression": "neutral",
            "duration":   1.8,
        },
    },

    # ── identity ──────────────────────────────────────────
    "NAME": {
        "description": "H-fingers tap together twice",
        "category":    "identity",
        "color":       "#673AB7",
        "animation": {
            "right_hand": {"start": (0.35, 0.28, 0.1), "end": (0.28, 0.28, 0.1), "h_shape": True, "tap": True},
            "left_hand": {"start": (0.15, 0.28, 0.1), "end": (0.22, 0.28, 0.1), "h_shape": True},
            "expression": "neutral",
            "duration":   1.5,
        },
    },

    # ── common ────────────────────────────────────────────
    "GOOD": {
        "description": "Flat hand from chin moves down to palm",
        "category":    "common",
        "color":       "#4CAF50",
        "animation": {
            "right_hand": {"start": (0.3, 0.4, 0.08), "end": (0.25, 0.25, 0.1)},
            "left_hand": {"start": (0.15, 0.25, 0.1), "end": (0.15, 0.25, 0.1), "palm_up": True},
            "expression": "pleased",
            "duration":   1.2,
        },
    },
    "BAD": {
        "description": "Flat hand from chin flips down",
        "category":    "common",
        "color":       "#F44336",
        "animation": {
            "right_hand": {"start": (0.3, 0.4, 0.08), "end": (0.3, 0.3, 0.15), "flip": True},
            "expression": "displeased",
            "duration":   1.2,
        },
    },
    "WANT": {
        "description": "Claw hands pull toward body",
        "category":    "common",
        "color":       "#FF9800",
        "animation": {
            "right_hand": {"start": (0.4, 0.25, 0.2), "end": (0.35, 0.2, 0.1), "claw": True},
            "left_hand": {"start": (0.1, 0.25, 0.2), "end": (0.15, 0.2, 0.1), "claw": True},
            "expression": "eager",
            "duration":   1.3,
        },
    },
    "NEED": {
        "description": "X-hand bends at wrist repeatedly",
        "category":    "common",
        "color":       "#FF5722",
        "animation": {
            "right_hand": {"start": (0.35, 0.28, 0.12), "end": (0.35, 0.22, 0.12), "x_shape": True, "bend": True},
            "expression": "earnest",
            "duration":   1.4,
        },
    },
    "HAVE": {
        "description": "Bent hands touch chest",
        "category":    "common",
        "color":       "#607D8B",
        "animation": {
            "right_hand": {"start": (0.4, 0.25, 0.15), "end": (0.3, 0.18, 0.08), "bent": True},
            "left_hand": {"start": (0.1, 0.25, 0.15), "end": (0.2, 0.18, 0.08), "bent": True},
            "expression": "neutral",
            "duration":   1.0,
        },
    },

    # ── emotions ──────────────────────────────────────────
    "LIKE": {
        "description": "Middle finger and thumb pull away from chest",
        "category":    "emotions",
        "color":       "#E91E63",
        "animation": {
            "right_hand": {"start": (0.3, 0.2, 0.08), "end": (0.38, 0.25, 0.15), "pull": True},
            "expression": "pleased",
            "duration":   1.2,
        },
    },
    "DONT_LIKE": {
        "description": "Middle finger flicks away from chest",
        "category":    "emotions",
        "color":       "#9E9E9E",
        "animation": {
            "right_hand": {"start": (0.3, 0.2, 0.08), "end": (0.4, 0.25, 0.2), "flick": True},
            "expression": "displeased",
            "duration":   1.2,
        },
    },

    # ── actions ───────────────────────────────────────────
    "COME": {
        "description": "Index fingers beckon toward body",
        "category":    "actions",
        "color":       "#00BCD4",
        "animation": {
            "right_hand": {"start": (0.4, 0.25, 0.2), "end": (0.3, 0.25, 0.1), "beckon": True, "pointing": True},
            "expression": "inviting",
            "duration":   1.3,
        },
    },
    "GO": {
        "description": "Index fingers point and move away",
        "category":    "actions",
        "color":       "#00BCD4",
        "animation": {
            "right_hand": {"start": (0.3, 0.25, 0.1), "end": (0.45, 0.25, 0.25), "pointing": True},
            "expression": "neutral",
            "duration":   1.2,
        },
    },
    "STOP": {
        "description": "Flat hand chops into palm",
        "category":    "actions",
        "color":       "#F44336",
        "animation": {
            "right_hand": {"start": (0.4, 0.35, 0.15), "end": (0.25, 0.25, 0.1), "chop": True},
            "left_hand": {"start": (0.15, 0.25, 0.1), "end": (0.15, 0.25, 0.1), "palm_up": True},
            "expression": "firm",
            "duration":   1.0,
        },
    },
    "WAIT": {
        "description": "Open hands wiggle fingers",
        "category":    "actions",
        "color":       "#FFC107",
        "animation": {
            "right_hand": {"start": (0.4, 0.25, 0.15), "end": (0.4, 0.25, 0.15), "wiggle": True, "open_hand": True},
            "left_hand": {"start": (0.1, 0.25, 0.15), "end": (0.1, 0.25, 0.15), "wiggle": True, "open_hand": True},
            "expression": "patient",
            "duration":   1.8,
        },
    },
    "FINISH": {
        "description": "Open hands flip outward",
        "category":    "actions",
        "color":       "#4CAF50",
        "animation": {
            "right_hand": {"start": (0.35, 0.28, 0.1), "end": (0.45, 0.28, 0.18), "flip": True, "open_hand": True},
            "left_hand": {"start": (0.15, 0.28, 0.1), "end": (0.05, 0.28, 0.18), "flip": True, "open_hand": True},
            "expression": "satisfied",
            "duration":   1.2,
        },
    },
    "START": {
        "description": "Index finger twists in other hand",
        "category":    "actions",
        "color":       "#8BC34A",
        "animation": {
            "right_hand": {"start": (0.25, 0.28, 0.1), "end": (0.25, 0.28, 0.1), "twist": True, "pointing": True},
            "left_hand": {"start": (0.2, 0.25, 0.1), "end": (0.2, 0.25, 0.1), "flat": True},
            "expression": "alert",
            "duration":   1.3,
        },
    },

    # ── time ──────────────────────────────────────────────
    "AGAIN": {
        "description": "Bent hand arcs into flat palm",
        "category":    "time",
        "color":       "#9C27B0",
        "animation": {
            "right_hand": {"start": (0.4, 0.3, 0.15), "end": (0.2, 0.25, 0.1), "arc": True, "bent": True},
            "left_hand": {"start": (0.15, 0.25, 0.1), "end": (0.15, 0.25, 0.1), "palm_up": True},
            "expression": "neutral",
            "duration":   1.3,
        },
    },

    # ── common ────────────────────────────────────────────
    "MORE": {
        "description": "Bunched fingertips tap together",
        "category":    "common",
        "color":       "#FF9800",
        "animation": {
            "right_hand": {"start": (0.38, 0.28, 0.12), "end": (0.28, 0.28, 0.1), "bunched": True, "tap": True},
            "left_hand": {"start": (0.12, 0.28, 0.12), "end": (0.22, 0.28, 0.1), "bunched": True},
            "expression": "eager",
            "duration":   1.2,
        },
    },
    "DIFFERENT": {
        "description": "Index fingers cross and separate",
        "category":    "common",
        "color":       "#673AB7",
        "animation": {
            "right_hand": {"start": (0.3, 0.28, 0.1), "end": (0.45, 0.28, 0.15), "pointing": True},
            "left_hand": {"start": (0.2, 0.28, 0.1), "end": (0.05, 0.28, 0.15), "pointing": True},
            "expression": "neutral",
            "duration":   1.3,
        },
    },
    "SAME": {
        "description": "Y-hands come together",
        "category":    "common",
        "color":       "#607D8B",
        "animation": {
            "right_hand": {"start": (0.4, 0.28, 0.12), "end": (0.28, 0.28, 0.1), "y_shape": True},
            "left_hand": {"start": (0.1, 0.28, 0.12), "end": (0.22, 0.28, 0.1), "y_shape": True},
            "expression": "neutral",
            "duration":   1.2,
        },
    },
    "MAYBE": {
        "description": "Flat hands alternate up and down",
        "category":    "common",
        "color":       "#9E9E9E",
        "animation": {
            "right_hand": {"start": (0.38, 0.3, 0.12), "end": (0.38, 0.25, 0.12), "alternate": True, "flat": True},
            "left_hand": {"start": (0.12, 0.25, 0.12), "end": (0.12, 0.3, 0.12), "alternate": True, "flat": True},
            "expression": "uncertain",
            "duration":   1.5,
        },
    },
    "IMPORTANT": {
        "description": "F-hands arc up and meet at center",
        "category":    "common",
        "color":       "#F44336",
        "animation": {
            "right_hand": {"start": (0.4, 0.2, 0.12), "end": (0.25, 0.35, 0.1), "f_shape": True, "arc": True},
            "left_hand": {"start": (0.1, 0.2, 0.12), "end": (0.25, 0.35, 0.1), "f_shape": True, "arc": True},
            "expression": "earnest",
            "duration":   1.5,
        },
    },
    "PROBLEM": {
        "description": "Bent V-hands twist while touching",
        "category":    "common",
        "color":       "#FF5722",
        "animation": {
            "right_hand": {"start": (0.35, 0.3, 0.1), "end": (0.32, 0.27, 0.1), "bent_v": True, "twist": True},
            "left_hand": {"start": (0.15, 0.3, 0.1), "end": (0.18, 0.27, 0.1), "bent_v": True, "twist": True},
            "expression": "concerned",
            "duration":   1.4,
        },
    },
    "EASY": {
        "description": "Curved fingers brush up off other fingers",
        "category":    "common",
        "color":       "#4CAF50",
        "animation": {
            "right_hand": {"start": (0.2, 0.25, 0.08), "end": (0.22, 0.32, 0.12), "brush_up": True, "curved": True},
            "left_hand": {"start": (0.15, 0.25, 0.1), "end": (0.15, 0.25, 0.1), "curved": True},
            "expression": "relaxed",
            "duration":   1.2,
        },
    },
    "HARD": {
        "description": "Bent V-hands strike together",
        "category":    "common",
        "color":       "#F44336",
        "animation": {
            "right_hand": {"start": (0.38, 0.32, 0.12), "end": (0.28, 0.28, 0.1), "bent_v": True, "strike": True},
            "left_hand": {"start": (0.12, 0.28, 0.1), "end": (0.22, 0.28, 0.1), "bent_v": True},
            "expression": "strained",
            "duration":   1.0,
        },
    },

    # ── actions ───────────────────────────────────────────
    "TRY": {
        "description": "S-hands push forward and down",
        "category":    "actions",
        "color":       "#FF9800",
        "animation": {
            "right_hand": {"start": (0.38, 0.28, 0.1), "end": (0.4, 0.22, 0.18), "s_shape": True, "push": True},
            "left_hand": {"start": (0.12, 0.28, 0.1), "end": (0.1, 0.22, 0.18), "s_shape": True, "push": True},
            "expression": "determined",
            "duration":   1.3,
        },
    },

    # ── communication ─────────────────────────────────────
    "REMEMBER": {
        "description": "Thumb touches forehead then moves to other thumb",
        "category":    "communication",
        "color":       "#9C27B0",
        "animation": {
            "right_hand": {"start": (0.32, 0.5, 0.05), "end": (0.2, 0.28, 0.1), "thumb_up": True},
            "left_hand": {"start": (0.18, 0.28, 0.1), "end": (0.18, 0.28, 0.1), "thumb_up": True},
            "expression": "thoughtful",
            "duration":   1.5,
        },
    },
    "FORGET": {
        "description": "Hand wipes across forehead and opens",
        "category":    "communication",
        "color":       "#9E9E9E",
        "animation": {
            "right_hand": {"start": (0.2, 0.52, 0.05), "end": (0.45, 0.48, 0.1), "wipe": True, "open_hand": True},
            "expression": "dismissive",
            "duration":   1.3,
        },
    },
}

FINGERSPELLING = {
    "A": {"handshape": "fist_thumb_side",   "description": "Fist with thumb beside"},
    "B": {"handshape": "flat_thumb_tucked", "description": "Flat hand, thumb tucked"},
    "C": {"handshape": "c_shape",           "description": "Curved hand, C-shape"},
    "D": {"handshape": "d_shape",           "description": "Index up, others touch thumb"},
    "E": {"handshape": "bent_fingers",      "description": "Fingers bent, thumb tucked"},
    "F": {"handshape": "ok_sign",           "description": "Thumb and index circle, others up"},
    "G": {"handshape": "g_shape",           "description": "Index and thumb parallel, pointing"},
    "H": {"handshape": "h_shape",           "description": "Index and middle parallel, pointing"},
    "I": {"handshape": "pinky_up",          "description": "Pinky up only"},
    "J": {"handshape": "pinky_trace_j",     "description": "Pinky up, trace J in air"},
    "K": {"handshape": "k_shape",           "description": "Index and middle up, thumb between"},
    "L": {"handshape": "l_shape",           "description": "L-shape, thumb and index"},
    "M": {"handshape": "m_shape",           "description": "Thumb under 3 fingers"},
    "N": {"handshape": "n_shape",           "description": "Thumb under 2 fingers"},
    "O": {"handshape": "o_shape",           "description": "Fingers curved to touch thumb"},
    "P": {"handshape": "p_shape",           "description": "K-hand pointing down"},
    "Q": {"handshape": "q_shape",           "description": "G-hand pointing down"},
    "R": {"handshape": "r_shape",           "description": "Index and middle crossed"},
    "S": {"handshape": "s_shape",           "description": "Fist with thumb over fingers"},
    "T": {"handshape": "t_shape",           "description": "Thumb between index and middle"},
    "U": {"handshape": "u_shape",           "description": "Index and middle up together"},
    "V": {"handshape": "v_shape",           "description": "Index and middle in V"},
    "W": {"handshape": "w_shape",           "description": "Index, middle, ring up"},
    "X": {"handshape": "x_shape",           "description": "Index bent at knuckle"},
    "Y": {"handshape": "y_shape",           "description": "Pinky and thumb extended"},
    "Z": {"handshape": "index_trace_z",     "description": "Index traces Z in air"},
}
