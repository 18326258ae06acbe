"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Quetris"
MIN_GRID_HEIGHT_PX: int = 400

PLAY_BUTTON: str = "Play"
LOADING_BUTTON: str = "Loading..."
PREV_LEVEL_BUTTON: str = "← Prev"
NEXT_LEVEL_BUTTON: str = "Next →"
LEVEL_POSITION_TEMPLATE: str = "{current} / {total}"

RETRY_BUTTON: str = "Retry"
NEXT_QUESTION_BUTTON: str = "Next Question"
BACK_TO_LEVELS_BUTTON: str = "Back to Level Select"
CORRECT_LABEL: str = "Correct!"
WRONG_LABEL: str = "Wrong!"
MISSED_MESSAGE: str = "Every option slipped past. Press Enter to drop them again."
SCORE_TEMPLATE: str = "Score: {score}"
QUESTION_POSITION_TEMPLATE: str = "Question {current} of {total}"

COMPLETED_TITLE: str = "Completed!"
COMPLETED_MESSAGE_TEMPLATE: str = "You've finished all questions in {title}!"

HINT_LEVEL_SELECT: str = "Use ← → arrows to browse levels | Press Enter to play"
HINT_PLAYING: str = (
    "Use ← → or click to move the catcher | Press ↓ or swipe down to drop options | "
    "Press Enter to play/retry/next | Press Esc to quit"
)
HINT_COMPLETED: str = "Press Enter to return to level select"

START_FAILED_TITLE: str = "Cannot start level"
SETTINGS_LOCKED_MESSAGE: str = "Return to level select before changing game settings."
