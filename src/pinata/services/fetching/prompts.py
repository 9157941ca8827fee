"""Prompt templates for vocabulary extraction, one per target language."""

from typing import Dict, Tuple

SYSTEM_INSTRUCTION = (
    "You are a helpful assistant that can analyze images and provide a list of "
    "vocabulary words in English and {language}."
)

PROMPT_TEMPLATE = """I have an image. I would like a structured list of English and {language} vocabulary present in the image, along with each word's location relative to the image dimensions.
Instructions for Vocabulary Extraction and Localization:
  - Vocabulary Extraction:
  Extract 7 relevant words that represent visible objects, actions, or themes in the image. Add 2 words for mood or atmosphere if possible.
  - Translations:
  Provide the English translation of each word.
  - Word Variations:
  For verbs, provide common conjugations. For adjectives and nouns, provide plural or feminine/masculine forms if applicable.
  - Word Properties:
  State each word's type (e.g., noun, verb, adjective).
  Include the pronunciation in simplified phonetic notation.
  - Locations:
  Provide each word's location in the format "[x%, y%]" based on the image dimensions.
  Each word should occupy a 10% width and 5% height area to prevent overlaps where possible.
  - Example Sentences:
  Use each word in a simple sentence and translate the sentence to English.
  - Response Format (one JSON object per line):
  <vocabulary>
{examples}
  </vocabulary>
  - Speed of response is important!"""

# (description example, atmosphere example) per language
_EXAMPLES: Dict[str, Tuple[str, str]] = {
    "spanish": (
        '{"type": "description", "wordType": "noun", "word": "perro", "english": "dog", "pronunciation": "peh-rroh", "conjugations": ["perros"], "sentence": "El perro corre.", "translation": "The dog runs.", "location": ["12%", "15%"]}',
        '{"type": "atmosphere", "wordType": "adjective", "word": "soleado", "english": "sunny", "pronunciation": "soh-leh-ah-doh", "conjugations": ["soleada", "soleadas"], "sentence": "El día está soleado.", "translation": "The day is sunny.", "location": ["50%", "10%"]}',
    ),
    "french": (
        '{"type": "description", "wordType": "noun", "word": "chien", "english": "dog", "pronunciation": "shee-en", "conjugations": ["chiens"], "sentence": "Le chien court.", "translation": "The dog runs.", "location": ["12%", "15%"]}',
        '{"type": "atmosphere", "wordType": "adjective", "word": "ensoleillé", "english": "sunny", "pronunciation": "on-so-lay-yay", "conjugations": ["ensoleillée", "ensoleillés"], "sentence": "La journée est ensoleillée.", "translation": "The day is sunny.", "location": ["50%", "10%"]}',
    ),
    "italian": (
        '{"type": "description", "wordType": "noun", "word": "cane", "english": "dog", "pronunciation": "kah-neh", "conjugations": ["cani"], "sentence": "Il cane corre.", "translation": "The dog runs.", "location": ["12%", "15%"]}',
        '{"type": "atmosphere", "wordType": "adjective", "word": "soleggiato", "english": "sunny", "pronunciation": "so-led-ja-to", "conjugations": ["soleggiata", "soleggiati"], "sentence": "Il giorno è soleggiato.", "translation": "The day is sunny.", "location": ["50%", "10%"]}',
    ),
    "japanese": (
        '{"type": "description", "wordType": "noun", "word": "犬", "english": "dog", "pronunciation": "ee-noo", "conjugations": ["いぬ"], "sentence": "犬が走っている。", "translation": "The dog is running.", "location": ["12%", "15%"]}',
        '{"type": "atmosphere", "wordType": "adjective", "word": "晴れ", "english": "sunny", "pronunciation": "hah-reh", "conjugations": ["晴れる", "晴れた"], "sentence": "今日は晴れている。", "translation": "It is sunny today.", "location": ["50%", "10%"]}',
    ),
    "korean": (
        '{"type": "description", "wordType": "noun", "word": "개", "english": "dog", "pronunciation": "geh", "conjugations": ["개들"], "sentence": "개가 달린다.", "translation": "The dog runs.", "location": ["12%", "15%"]}',
        '{"type": "atmosphere", "wordType": "adjective", "word": "맑은", "english": "clear", "pronunciation": "mal-geun", "conjugations": ["맑다", "맑아"], "sentence": "하늘이 맑다.", "translation": "The sky is clear.", "location": ["50%", "10%"]}',
    ),
    "chinese": (
        '{"type": "description", "wordType": "noun", "word": "狗", "english": "dog", "pronunciation": "go", "conjugations": [], "sentence": "狗在跑。", "translation": "The dog is running.", "location": ["12%", "15%"]}',
        '{"type": "atmosphere", "wordType": "adjective", "word": "晴朗", "english": "sunny", "pronunciation": "ching-lahng", "conjugations": ["晴朗的"], "sentence": "天空很晴朗。", "translation": "The sky is sunny.", "location": ["50%", "10%"]}',
    ),
    "hindi": (
        '{"type": "description", "wordType": "noun", "word": "गाड़ी", "english": "car", "pronunciation": "gaa-ree", "conjugations": ["गाड़ियाँ"], "sentence": "गाड़ी चलती है।", "translation": "The car runs.", "location": ["12%", "15%"]}',
        '{"type": "atmosphere", "wordType": "adjective", "word": "धूपदार", "english": "sunny", "pronunciation": "dhoop-daar", "conjugations": [], "sentence": "दिन धूपदार है।", "translation": "The day is sunny.", "location": ["50%", "10%"]}',
    ),
}

SUPPORTED_LANGUAGES: Tuple[str, ...] = tuple(_EXAMPLES)
DEFAULT_LANGUAGE = "spanish"


def _require_language(language: str) -> str:
    """Normalize a language name, failing fast on unsupported ones."""
    key = (language or "").strip().lower()
    if key not in _EXAMPLES:
        raise ValueError(f"Unsupported target language: {language}")
    return key


def build_prompt(language: str) -> str:
    """Return the extraction prompt for the given target language.

    Raises:
        ValueError: If the language is not supported.
    """
    key = _require_language(language)
    examples = "\n".join(f"    {line}" for line in _EXAMPLES[key])
    return PROMPT_TEMPLATE.format(language=key.capitalize(), examples=examples)


def build_system_instruction(language: str) -> str:
    return SYSTEM_INSTRUCTION.format(language=_require_language(language).capitalize())
