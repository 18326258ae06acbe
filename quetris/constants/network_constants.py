"""Quiz data source configuration."""

QUIZ_FILE_ENV: str = "QUETRIS_QUIZ_FILE"
SUPABASE_URL_ENV: str = "QUETRIS_SUPABASE_URL"
SUPABASE_KEY_ENV: str = "QUETRIS_SUPABASE_KEY"
REQUEST_TIMEOUT_SECONDS: float = 10.0
LEVELS_TABLE: str = "levels"
QUESTIONS_TABLE: str = "questions"
