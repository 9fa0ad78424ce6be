"""
Labels for clarity.
"""

from typing import List, Mapping, Union

Word = str  # lowercase letters only
LetterMatchCount = int  # 0 -> len(secret word)
GuessedWordRow = Mapping[str, Union[Word, LetterMatchCount]]
WordList = List[Word]
