"""Sample Vocabulary Fetcher - canned reply for offline runs and demos."""

from typing import Optional

from pinata.services.fetching.vocabulary_fetcher import FetchResult, VocabularyFetcher

# Uses the legacy "spanish"/"wordConjugation" keys on purpose; the parser
# still has to understand replies produced by the first prompt version.
SAMPLE_RESPONSE = """
<vocabulary>
  {"type": "description", "wordType": "noun", "spanish": "perro", "english": "dog", "wordConjugation": "[perros]", "sentence": "El perro feo corre en el patio grande", "translation": "The ugly dog runs in the big yard", "location": ["12%", "15%"]}
  {"type": "description", "wordType": "noun", "spanish": "césped", "english": "grass", "wordConjugation": "[céspedes]", "sentence": "El césped es verde", "translation": "The grass is green", "location": ["22.4%", "24%"]}
  {"type": "description", "wordType": "verb", "spanish": "correr", "english": "run", "wordConjugation": "[corro, corres, corrió, correrás, corre, corriendo, corremos]", "sentence": "El perro corre en el césped", "translation": "The dog runs in the grass", "location": ["30%", "25%"]}
  {"type": "description", "wordType": "noun", "spanish": "alegría", "english": "joy", "wordConjugation": "[alegrías]", "sentence": "La alegría es intensa", "translation": "The joy is intense", "location": ["42%", "37.4%"]}
  {"type": "atmosphere", "wordType": "adjective", "spanish": "soleado", "english": "sunny", "wordConjugation": "[soleada, soleados, soleadas]", "sentence": "El día está soleado", "translation": "The day is sunny", "location": ["50%", "10%"]}
  {"type": "atmosphere", "wordType": "adjective", "spanish": "tranquilo", "english": "calm", "wordConjugation": "[tranquila, tranquilos, tranquilas]", "sentence": "El parque está tranquilo", "translation": "The park is calm", "location": ["60%", "15%"]}
</vocabulary>
"""


class SampleVocabularyFetcher(VocabularyFetcher):
    """Returns a fixed Spanish reply without touching the network."""

    MODEL_NAME = "sample"

    def __init__(self, response: str = SAMPLE_RESPONSE):
        self.response = response

    def fetch(self, image_base64: str, target_language: str, api_key: Optional[str]) -> FetchResult:
        return FetchResult(text=self.response, model=self.MODEL_NAME)
