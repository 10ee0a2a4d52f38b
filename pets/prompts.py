"""Prompt templates for the pet chat advisor and child-image generation."""
from typing import Optional, Union

from pets.models import Pet, PetInfo

UNKNOWN = "Unknown"

SAME_CATEGORY_QUALITY = "adorable, fluffy, high quality, professional photo"
MIXED_CATEGORY_QUALITY = "adorable, high quality, professional photo"

# Extra modifiers used only when a visual description is available
SAME_CATEGORY_DETAIL = "cute face, detailed fur texture"
MIXED_CATEGORY_DETAIL = "detailed fur texture"

CHAT_SYSTEM_TEMPLATE = """You are a pet health advisor. Please kindly answer the owner's questions based on the following pet information.

Pet Information:
- Name: {name}
- Category: {category}
- Breed: {breed}
- Gender: {gender}
- Age: {age}

Important Notes:
- Provide only general advice
- If symptoms are urgent, always encourage consulting a veterinarian
- Do not provide diagnoses or prescriptions
- Explain in gentle, easy-to-understand language"""

ANALYSIS_TEMPLATE = """Look at these two pet images and describe their visual characteristics (fur color, patterns, eye color, body type, etc.) concisely in English.

Image 1: {name1} ({kind1})
Image 2: {name2} ({kind2})

Please respond in the following format:
Parent 1: [fur color], [pattern characteristics], [other features]
Parent 2: [fur color], [pattern characteristics], [other features]
Child (mix): [imagined appearance of child combining features of both]"""


def _or_unknown(value: Optional[Union[str, int, float]]) -> str:
    if value is None or value == "":
        return UNKNOWN
    return str(value)


def build_chat_system_prompt(pet_info: PetInfo) -> str:
    """Render the advisor system prompt for one pet."""
    return CHAT_SYSTEM_TEMPLATE.format(
        name=_or_unknown(pet_info.name),
        category=_or_unknown(pet_info.category),
        breed=_or_unknown(pet_info.breed),
        gender=_or_unknown(pet_info.gender),
        age=_or_unknown(pet_info.age),
    )


def build_chat_question(message: str) -> str:
    return f"Question: {message}"


def same_category(parent1: Pet, parent2: Pet) -> bool:
    return parent1.category == parent2.category


def category_subject(parent1: Pet, parent2: Pet) -> str:
    """The opening clause: a baby of one category, or a hybrid creature."""
    if same_category(parent1, parent2):
        return f"A cute baby {parent1.category.lower()}"
    return f"A creature that is a mix of a {parent1.category.lower()} and a {parent2.category.lower()}"


def build_breed_prompt(parent1: Pet, parent2: Pet) -> str:
    """Prompt from breed names only, used when no visual description is available."""
    breed1 = parent1.breed_or_category
    breed2 = parent2.breed_or_category
    subject = category_subject(parent1, parent2)
    if same_category(parent1, parent2):
        return f"{subject} that is a mix between a {breed1} and a {breed2}, {SAME_CATEGORY_QUALITY}"
    return f"{subject}, combining features of a {breed1} and a {breed2}, {MIXED_CATEGORY_QUALITY}"


def build_described_prompt(parent1: Pet, parent2: Pet, child_description: str) -> str:
    """Prompt that interpolates a vision-derived description of the child."""
    breed_info = f"mix of {parent1.breed_or_category} and {parent2.breed_or_category}"
    subject = category_subject(parent1, parent2)
    if same_category(parent1, parent2):
        return f"{subject} ({breed_info}), {child_description}, {SAME_CATEGORY_QUALITY}, {SAME_CATEGORY_DETAIL}"
    return f"{subject} ({breed_info}), {child_description}, {MIXED_CATEGORY_QUALITY}, {MIXED_CATEGORY_DETAIL}"


def build_analysis_prompt(parent1: Pet, parent2: Pet) -> str:
    """Instruction sent alongside both parent photos to the vision model."""
    return ANALYSIS_TEMPLATE.format(
        name1=parent1.name or UNKNOWN,
        kind1=parent1.breed_or_category,
        name2=parent2.name or UNKNOWN,
        kind2=parent2.breed_or_category,
    )
