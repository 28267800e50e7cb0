"""
Game Configuration Constants Module

This module defines all game configuration constants and loads the two
word lists the engine plays with:

- answers.json: the words that can be a daily answer
- guesses.json: additional words accepted as guesses

Both lists are uppercase, fixed-length alphabetic tokens. A guess is
accepted when it appears in either list.
"""

import json
import os
from datetime import datetime, timezone
from typing import List, Final

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every answer and every guess.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per puzzle.
"""

EPOCH: Final[datetime] = datetime(2021, 12, 30, tzinfo=timezone.utc)
"""
Day zero of the daily puzzle rotation (UTC midnight).
"""


def _load_word_list(file_name: str) -> List[str]:
    """
    Load a word list from a JSON file next to this module.
    
    Args:
        file_name: Name of the JSON file inside the config directory
    
    Returns:
        List[str]: List of uppercase words of WORD_LENGTH letters
        
    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, file_name)
    
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_name}: {e}") from e
    
    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")
        
    if not word_list:
        raise ValueError("Word list cannot be empty")
        
    uppercase_words = [word.upper() for word in word_list]
    
    for word in uppercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")
            
    return uppercase_words


# Word lists loaded from JSON files
ANSWER_LIST: Final[List[str]] = _load_word_list('answers.json')
GUESS_LIST: Final[List[str]] = _load_word_list('guesses.json')


def validate_word_list_integrity(words: List[str] = None) -> bool:
    """
    Validates the integrity and consistency of a word list.
    
    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting
    
    Args:
        words: Word list to check, defaults to the answer list
    
    Returns:
        bool: True if word list passes all validation checks
        
    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if words is None:
        words = ANSWER_LIST
    
    if not words:
        raise ValueError("Word list cannot be empty")
    
    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")
        
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")
        
        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")
    
    seen = set()
    duplicates = []
    for word in words:
        if word in seen:
            duplicates.append(word)
        seen.add(word)
    if duplicates:
        raise ValueError(f"Duplicate words found in word list: {duplicates}")
    
    return True


def get_word_statistics(words: List[str] = None) -> dict:
    """
    Analyzes a word list and returns statistical information.
    
    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters
    """
    if words is None:
        words = ANSWER_LIST
    
    if not words:
        return {"error": "Word list is empty"}
    
    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)
    
    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1
    
    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity(ANSWER_LIST)
        validate_word_list_integrity(GUESS_LIST)
        print(" Word list validation passed")
        
        stats = get_word_statistics()
        print(f" Answer list statistics: {stats}")
        
        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
