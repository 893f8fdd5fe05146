from app.domain.enums.mood_type import MoodType
from app.domain.enums.questionnaire_type import QuestionnaireType, get_questionnaire_type

__all__ = ["MoodType", "QuestionnaireType", "get_questionnaire_type"]
