"""
Explicit validation & Pydantic models
- Models are used to validate and serialize/deserialize data
  exchanged between the client and server.
- Defines the structure of API requests and responses.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

# 1. One row of the guessed words list (never changes once created)
class GuessedWordEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    guessed_word: str = Field(..., description="The word the player guessed")
    letter_match_count: int = Field(..., ge=0, description="Letters shared with the secret word")

# 2. Represents response when a new game is started
class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game; secret word is never returned")
    success: bool = Field(..., description="Whether the secret word has been guessed")
    word_length: int = Field(..., description="How many letters the secret word has")

# 3. Validates player's guess
class GuessRequest(BaseModel):
    guess: str = Field(..., description="A single word made of letters a-z")

    @field_validator("guess")
    @classmethod
    def validate_word(cls, guess: str) -> str:
        """
        Trim and lowercase the word, then check it is letters only.
        The match counter expects lowercase input, so we normalize here.
        """
        word = guess.strip().lower()
        if word == "":
            raise ValueError("Guess must not be empty.")
        if not word.isalpha() or not word.isascii():
            raise ValueError("Guess must contain letters a-z only.")
        return word

    model_config = {
        "json_schema_extra": {
            "examples": [
                { "guess": "train" },
                { "guess": "party" },
            ]
        }
    }

# 4. Represents the overall state of the game
class GameState(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    success: bool = Field(..., description="Whether the secret word has been guessed")
    guessed_words: List[GuessedWordEntry] = Field(
        default_factory=list, description="All guesses made so far, oldest first"
    )
    secret_word: Optional[str] = Field(None, description="The secret word (only revealed once guessed)")

# 5. Result of a guess
class GuessResponse(BaseModel):
    success: bool = Field(..., description="Whether the secret word has been guessed")
    feedback: GuessedWordEntry | None = Field(None, description="The latest guessed word and its count")
    guess_count: int = Field(..., description="How many guesses were made this game")
    secret_word: str | None = Field(None, description="The secret word (only revealed once guessed)")
    note: str | None = Field(None, description="Extra note (ex. 'Game won. No more guesses.')")
