# app/data/prompt_repository.py
from enum import Enum
from typing import Dict, List, Any


# =====================================================================
# ENUMS
# =====================================================================

class PromptCategory(str, Enum):
    """Kinds of journaling prompts."""
    MINDFULNESS = "mindfulness"
    GRATITUDE = "gratitude"
    REFLECTION = "reflection"
    MOTIVATION = "motivation"


# =====================================================================
# DEFAULT PROMPTS (seeded when no active prompt exists)
# =====================================================================

DEFAULT_PROMPTS: List[Dict[str, Any]] = [
    {"content": "I slow down to hear the flowers bloom and feel the gentle touch of the breeze.", "category": PromptCategory.MINDFULNESS.value},
    {"content": "What are three things you're grateful for today?", "category": PromptCategory.GRATITUDE.value},
    {"content": "Describe a moment today that made you smile.", "category": PromptCategory.REFLECTION.value},
    {"content": "What would you tell your younger self?", "category": PromptCategory.REFLECTION.value},
    {"content": "What's one small step you can take today toward your dreams?", "category": PromptCategory.MOTIVATION.value},
    {"content": "Notice five things you can see, four you can touch, three you can hear, two you can smell, and one you can taste.", "category": PromptCategory.MINDFULNESS.value},
    {"content": "What does your ideal day look like?", "category": PromptCategory.REFLECTION.value},
    {"content": "Write about something that's been on your mind lately.", "category": PromptCategory.REFLECTION.value},
    {"content": "What lesson did today teach you?", "category": PromptCategory.REFLECTION.value},
    {"content": "List three things that brought you peace today.", "category": PromptCategory.GRATITUDE.value},
]

FALLBACK_PROMPT = "Take a moment to reflect on your day."
