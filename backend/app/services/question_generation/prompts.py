"""Prompt text shared by every question generation provider."""

SYSTEM_INSTRUCTIONS = (
    "You are AskMaster, an assistant that only returns valid JSON arrays of "
    "multiple-choice questions. Respond with nothing except the JSON array requested."
)


def build_prompt(topic: str, question_count: int, temperature: float) -> str:
    """
    Build the instruction asking a model for multiple-choice questions.

    Args:
        topic: Subject the questions should cover
        question_count: Number of questions to request
        temperature: Creativity hint, embedded verbatim in the text

    Returns:
        Prompt string suitable for any provider
    """
    return (
        f"Generate a JSON array of {question_count} multiple-choice questions about {topic}. "
        'Each question should be an object with the following keys: "question", '
        '"answers" (an array of 4 strings), and "correctAnswerIndex" '
        '(the index of the correct answer in the "answers" array). '
        f"The output must be a valid JSON array. Creativity level: {temperature}."
    )
