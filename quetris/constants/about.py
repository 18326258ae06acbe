"""Static metadata describing Quetris."""

APP_NAME = "Quetris"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Quetris is a falling-block quiz game. Each answer drops down its own column; "
    "steer the catcher under the right one before it reaches the bottom."
)

HELP_TEXT = (
    "Level select: ←/→ choose a level, Enter starts it.\n\n"
    "In game: ←/→ or a click on a column moves the catcher, ↓ or a downward "
    "swipe drops every option at once, Esc returns to level select.\n\n"
    "After a catch, Enter moves on to the next question when you were right, "
    "or drops the same options again in new columns when you were wrong.\n\n"
    "Quiz content comes from the Supabase project named by QUETRIS_SUPABASE_URL and "
    "QUETRIS_SUPABASE_KEY, or from the bundled levels when those are not set."
)
