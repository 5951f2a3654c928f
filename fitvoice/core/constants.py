"""Static constants and mappings for voice commands."""

from __future__ import annotations

# Order matters: the first matching pattern decides the command.
COMMAND_PATTERNS = [
    (r"start\s+(a\s+)?workout", "START_WORKOUT"),
    (r"begin\s+(a\s+)?workout", "START_WORKOUT"),
    (r"log\s+(my\s+)?weight", "LOG_WEIGHT"),
    (r"record\s+(my\s+)?weight", "LOG_WEIGHT"),
    (r"enter\s+(my\s+)?weight", "LOG_WEIGHT"),
    (r"show\s+(today'?s?|todays)\s+workout", "SHOW_TODAY_WORKOUT"),
    (r"today'?s?\s+workout", "SHOW_TODAY_WORKOUT"),
    (r"add\s+(a\s+)?set", "ADD_SET"),
    (r"next\s+set", "ADD_SET"),
    (r"complete\s+set", "ADD_SET"),
    (r"finish\s+(the\s+)?workout", "FINISH_WORKOUT"),
    (r"complete\s+(the\s+)?workout", "FINISH_WORKOUT"),
    (r"end\s+(the\s+)?workout", "FINISH_WORKOUT"),
    (r"open\s+body\s+tracker", "OPEN_BODY_TRACKER"),
    (r"go\s+to\s+body\s+tracker", "OPEN_BODY_TRACKER"),
    (r"start\s+rest\s+timer", "START_REST_TIMER"),
    (r"rest\s+timer", "START_REST_TIMER"),
    (r"take\s+(a\s+)?rest", "START_REST_TIMER"),
    (r"generate\s+(a\s+)?workout\s+plan", "GENERATE_WORKOUT_PLAN"),
    (r"create\s+(a\s+)?workout\s+plan", "GENERATE_WORKOUT_PLAN"),
    (r"ai\s+(workout\s+)?coach", "GENERATE_WORKOUT_PLAN"),
    (r"open\s+ai\s+coach", "GENERATE_WORKOUT_PLAN"),
]

COMMAND_DESCRIPTIONS = {
    "START_WORKOUT": "Starting workout",
    "LOG_WEIGHT": "Opening weight log",
    "SHOW_TODAY_WORKOUT": "Showing today's workout",
    "ADD_SET": "Adding set",
    "FINISH_WORKOUT": "Finishing workout",
    "OPEN_BODY_TRACKER": "Opening body tracker",
    "START_REST_TIMER": "Starting rest timer",
    "GENERATE_WORKOUT_PLAN": "Opening AI Coach",
    "UNKNOWN": 'Command not recognized: "{text}"',
}

COMMAND_EXAMPLES = [
    ("Start workout", "START_WORKOUT", "Navigate to workout selection", "Home & Any"),
    ("Log my weight", "LOG_WEIGHT", "Focus weight input field", "Body Tracker"),
    ("Show today's workout", "SHOW_TODAY_WORKOUT", "Open calendar view", "Home & Any"),
    ("Add set", "ADD_SET", "Mark next exercise complete", "Workout Checklist"),
    ("Finish workout", "FINISH_WORKOUT", "Complete and save workout", "Workout Checklist"),
    ("Open body tracker", "OPEN_BODY_TRACKER", "Navigate to body tracker", "Home & Any"),
    ("Start rest timer", "START_REST_TIMER", "Open rest timer", "Home, Workout"),
    ("Generate workout plan", "GENERATE_WORKOUT_PLAN", "Open AI Coach", "Home, AI Coach"),
]

ALTERNATIVE_PHRASES = [
    ("Begin workout", "START_WORKOUT"),
    ("Record my weight", "LOG_WEIGHT"),
    ("Enter my weight", "LOG_WEIGHT"),
    ("Next set", "ADD_SET"),
    ("Complete set", "ADD_SET"),
    ("Complete workout", "FINISH_WORKOUT"),
    ("End workout", "FINISH_WORKOUT"),
    ("Go to body tracker", "OPEN_BODY_TRACKER"),
    ("Rest timer", "START_REST_TIMER"),
    ("Take a rest", "START_REST_TIMER"),
    ("Create workout plan", "GENERATE_WORKOUT_PLAN"),
    ("AI coach", "GENERATE_WORKOUT_PLAN"),
]

# What each screen does with a recognized command; commands a screen does not
# list are ignored there.
SCREEN_ACTIONS = {
    "home": {
        "START_WORKOUT": "Navigate to body part selection",
        "LOG_WEIGHT": "Open body tracker",
        "OPEN_BODY_TRACKER": "Open body tracker",
        "GENERATE_WORKOUT_PLAN": "Open AI Coach",
        "SHOW_TODAY_WORKOUT": "Show calendar",
        "START_REST_TIMER": "Open rest timer",
    },
    "workout-checklist": {
        "ADD_SET": "Mark next incomplete exercise complete",
        "FINISH_WORKOUT": "Save workout",
        "START_REST_TIMER": "Open rest timer",
    },
    "body-tracker": {
        "LOG_WEIGHT": "Focus weight input",
    },
    "ai-coach": {
        "GENERATE_WORKOUT_PLAN": "Generate workout plan",
    },
}

DEFAULT_SCREEN = "home"
DEFAULT_FUZZY_THRESHOLD = 85
