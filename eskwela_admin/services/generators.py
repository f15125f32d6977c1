"""
Synthetic data generators.

Every generator is a pure function of its count, seed and reference time:
the same arguments always produce the same records, and ``seed=None`` draws
fresh randomness. Ids are 1-based and sequential within the family (questions
and attempts are offset by their quiz id).
"""
import logging
import math
import random
from datetime import datetime, timedelta
from typing import Any, List, Optional, Sequence

from ..models.base import utcnow
from ..models.entities import ARContent, Question, Quiz, QuizAnswer, QuizAttempt, User
from ..models.enums import (
    GRADE_LEVELS,
    AttemptStatus,
    ContentType,
    QuizStatus,
    RecordStatus,
    Role,
    ScoringMethod,
    Subject,
)

logger = logging.getLogger(__name__)

QUESTION_ID_FACTOR = 100
ATTEMPT_ID_FACTOR = 1000
DEFAULT_ATTEMPT_TOTAL_POINTS = 20
ANSWERS_PER_SYNTHETIC_ATTEMPT = 10

USER_NAMES = [
    "Maria Santos", "Juan Dela Cruz", "Ana Garcia", "Pedro Rodriguez", "Sofia Martinez",
    "Carlos Lopez", "Isabella Gonzalez", "Miguel Torres", "Lucia Hernandez", "Diego Morales",
]

CONTENT_TITLES = [
    "Ancient Philippines Artifacts", "Solar System Model", "Traditional Filipino Houses",
    "Human Body Systems", "Philippine Heroes Monument", "Plant Life Cycle",
    "Rizal's Life Timeline", "Water Cycle Demonstration", "Bayanihan Spirit",
    "Animal Habitats in Philippines",
]

CONTENT_DESCRIPTIONS = [
    "Explore ancient Filipino artifacts and their historical significance",
    "Interactive 3D model of our solar system with planetary details",
    "Traditional architecture of Filipino houses across different regions",
    "Comprehensive overview of human body systems and functions",
    "Monument dedicated to Philippine national heroes",
    "Complete plant life cycle from seed to mature plant",
    "Timeline of Dr. Jose Rizal's life and contributions",
    "Interactive demonstration of the water cycle process",
    "Understanding the Filipino spirit of community cooperation",
    "Diverse animal habitats found throughout the Philippines",
]

QUIZ_TITLES = [
    "Philippine History Quiz", "Science Fundamentals", "Heroes of the Philippines",
    "Basic Biology Test", "Cultural Heritage Quiz", "Earth Science Assessment",
    "National Symbols Quiz", "Human Body Quiz", "Filipino Traditions Test",
    "Environmental Science Quiz", "Ancient Civilizations", "Plant Biology",
    "Weather Patterns", "Filipino Culture", "Space Exploration",
]

QUIZ_DESCRIPTIONS = [
    "Test your knowledge of Philippine history and important events",
    "Fundamental concepts in science for elementary students",
    "Learn about the heroes who shaped our nation",
    "Basic biology concepts and living organisms",
    "Explore the rich cultural heritage of the Philippines",
    "Understanding Earth science and natural phenomena",
    "National symbols and their significance",
    "Human body systems and functions",
    "Traditional Filipino customs and practices",
    "Environmental science and conservation",
]

QUIZ_TIME_LIMITS = [10, 15, 20, 30, 45, 60]

QUESTION_BANK = [
    ("Who is considered the national hero of the Philippines?",
     ["Jose Rizal", "Andres Bonifacio", "Emilio Aguinaldo", "Lapu-Lapu"],
     "Jose Rizal is widely considered the national hero of the Philippines for his writings and peaceful resistance."),
    ("What is the largest planet in our solar system?",
     ["Jupiter", "Saturn", "Neptune", "Earth"],
     "Jupiter is the largest planet in our solar system, with a mass greater than all other planets combined."),
    ("When did the Philippines gain independence?",
     ["June 12, 1898", "July 4, 1946", "August 31, 1957", "February 25, 1986"],
     "The Philippines declared independence from Spain on June 12, 1898."),
    ("Which organ pumps blood throughout the body?",
     ["Heart", "Lungs", "Liver", "Kidneys"],
     "The heart is the organ that pumps blood throughout the body via the circulatory system."),
    ("What is the capital city of the Philippines?",
     ["Manila", "Cebu", "Davao", "Quezon City"],
     "Manila is the capital city of the Philippines and the center of government."),
    ("How many bones are in the adult human body?",
     ["206", "208", "210", "212"],
     "The adult human body has 206 bones."),
    ("Who wrote the Philippine national anthem?",
     ["Julian Felipe", "Jose Palma", "Nicanor Abelardo", "Francisco Santiago"],
     "Julian Felipe composed the music for the Philippine national anthem."),
    ("What gas do plants absorb from the atmosphere?",
     ["Carbon dioxide", "Oxygen", "Nitrogen", "Hydrogen"],
     "Plants absorb carbon dioxide from the atmosphere during photosynthesis."),
    ("Which sea surrounds the Philippines?",
     ["South China Sea", "Pacific Ocean", "Indian Ocean", "Atlantic Ocean"],
     "The Philippines is surrounded by the South China Sea and other bodies of water."),
    ("What is the process by which plants make food?",
     ["Photosynthesis", "Respiration", "Digestion", "Circulation"],
     "Photosynthesis is the process by which plants make their own food using sunlight."),
    ("Who was the first president of the Philippines?",
     ["Emilio Aguinaldo", "Manuel Quezon", "Jose Laurel", "Sergio Osmena"],
     "Emilio Aguinaldo was the first president of the Philippines."),
    ("What is the smallest unit of matter?",
     ["Atom", "Molecule", "Cell", "Electron"],
     "An atom is the smallest unit of matter that retains the properties of an element."),
    ("Which mountain is the highest in the Philippines?",
     ["Mount Apo", "Mount Mayon", "Mount Pulag", "Mount Banahaw"],
     "Mount Apo in Mindanao is the highest mountain in the Philippines."),
    ("What are the three states of matter?",
     ["Solid, Liquid, Gas", "Hot, Cold, Warm", "Big, Medium, Small", "Fast, Slow, Still"],
     "The three states of matter are solid, liquid, and gas."),
    ("When was Rizal executed?",
     ["December 30, 1896", "June 19, 1861", "December 29, 1896", "January 1, 1897"],
     "Jose Rizal was executed on December 30, 1896."),
]

# Completed is three times as likely as the other outcomes
ATTEMPT_STATUS_WEIGHTS = [
    AttemptStatus.COMPLETED, AttemptStatus.COMPLETED, AttemptStatus.COMPLETED,
    AttemptStatus.IN_PROGRESS, AttemptStatus.ABANDONED,
]


def score_percentage(score: int, total_points: int) -> int:
    """Whole-number percentage, halves rounded up."""
    if not total_points:
        return 0
    return math.floor(score * 100 / total_points + 0.5)


def make_rng(namespace: str, seed: Optional[int]) -> random.Random:
    """Independent stream per namespace so families never perturb each other."""
    if seed is None:
        return random.Random()
    return random.Random(f"{namespace}:{seed}")


def _recent(rng: random.Random, now: datetime, days: int) -> datetime:
    return now - timedelta(seconds=rng.random() * days * 24 * 60 * 60)


def qr_code_for(subject: Subject, content_id: int) -> str:
    return f"ESK_{subject.value.upper()[:4]}_{content_id:03d}"


def file_name_for(title: str, content_type: ContentType) -> str:
    extension = ".glb" if content_type == ContentType.MODEL_3D else ".mp3"
    return "_".join(title.lower().split()) + extension


def generate_users(
    count: int = 10, seed: Optional[int] = None, now: Optional[datetime] = None
) -> List[User]:
    rng = make_rng("users", seed)
    now = now or utcnow()
    users = []
    for i in range(count):
        role = rng.choice(list(Role))
        users.append(User(
            id=i + 1,
            name=USER_NAMES[i % len(USER_NAMES)],
            email=f"user{i + 1}@eskwela.edu.ph",
            role=role,
            grade_level=rng.choice(GRADE_LEVELS) if role == Role.STUDENT else None,
            last_active=_recent(rng, now, 7),
            created_at=_recent(rng, now, 30),
            status=RecordStatus.ACTIVE if rng.random() > 0.1 else RecordStatus.INACTIVE,
        ))
    return users


def generate_content(
    count: int = 10, seed: Optional[int] = None, now: Optional[datetime] = None
) -> List[ARContent]:
    rng = make_rng("content", seed)
    now = now or utcnow()
    items = []
    for i in range(count):
        subject = rng.choice(list(Subject))
        content_type = rng.choice(list(ContentType))
        title = CONTENT_TITLES[i % len(CONTENT_TITLES)]
        file_name = file_name_for(title, content_type)
        if content_type == ContentType.MODEL_3D:
            file_size = f"{rng.random() * 50 + 10:.1f}MB"
        else:
            file_size = f"{rng.random() * 10 + 2:.1f}MB"
        items.append(ARContent(
            id=i + 1,
            title=title,
            description=CONTENT_DESCRIPTIONS[i % len(CONTENT_DESCRIPTIONS)],
            subject=subject,
            grade_level=rng.choice(GRADE_LEVELS),
            type=content_type,
            qr_code=qr_code_for(subject, i + 1),
            thumbnail=f"/thumbnails/{content_type.value}_{i + 1}.jpg",
            file_url=f"/content/{file_name}",
            file_name=file_name,
            file_size=file_size,
            created_at=_recent(rng, now, 30),
            updated_at=_recent(rng, now, 7),
            status=RecordStatus.ACTIVE if rng.random() > 0.1 else RecordStatus.INACTIVE,
        ))
    return items


def generate_quizzes(
    count: int = 10,
    seed: Optional[int] = None,
    now: Optional[datetime] = None,
    content_count: int = 50,
) -> List[Quiz]:
    rng = make_rng("quizzes", seed)
    now = now or utcnow()
    quizzes = []
    for i in range(count):
        questions_count = rng.randint(5, 19)
        points_per_question = rng.randint(1, 3)
        associated = rng.randint(1, content_count) if rng.random() > 0.6 and content_count else None
        quizzes.append(Quiz(
            id=i + 1,
            title=QUIZ_TITLES[i % len(QUIZ_TITLES)],
            description=QUIZ_DESCRIPTIONS[i % len(QUIZ_DESCRIPTIONS)],
            subject=rng.choice(list(Subject)),
            grade_level=rng.choice(GRADE_LEVELS),
            time_limit=rng.choice(QUIZ_TIME_LIMITS),
            max_attempts=rng.randint(1, 3),
            scoring_method=rng.choice(list(ScoringMethod)),
            status=rng.choice(list(QuizStatus)),
            associated_content_id=associated,
            questions_count=questions_count,
            total_points=questions_count * points_per_question,
            created_at=_recent(rng, now, 30),
            updated_at=_recent(rng, now, 7),
            created_by=rng.randint(1, 10),
        ))
    return quizzes


def generate_questions(
    quiz_id: int, count: int = 10, seed: Optional[int] = None
) -> List[Question]:
    rng = make_rng(f"questions:{quiz_id}", seed)
    questions = []
    for i in range(count):
        title, options, explanation = QUESTION_BANK[i % len(QUESTION_BANK)]
        questions.append(Question(
            id=quiz_id * QUESTION_ID_FACTOR + i + 1,
            quiz_id=quiz_id,
            title=title,
            options=list(options),
            correct_answer=0,
            order=i + 1,
            points=rng.randint(1, 3),
            explanation=explanation,
        ))
    return questions


def _synthesize_answers(
    rng: random.Random, quiz_id: int, questions: Optional[Sequence[Question]]
) -> List[QuizAnswer]:
    if questions:
        targets = [(q.id, q.points) for q in questions]
    else:
        targets = [
            (quiz_id * QUESTION_ID_FACTOR + q + 1, 2)
            for q in range(ANSWERS_PER_SYNTHETIC_ATTEMPT)
        ]
    answers = []
    for question_id, points in targets:
        is_correct = rng.random() > 0.3
        answers.append(QuizAnswer(
            question_id=question_id,
            selected_answer=rng.randint(0, 3),
            is_correct=is_correct,
            points_earned=points if is_correct else 0,
            time_spent=rng.randint(30, 150),
        ))
    return answers


def generate_quiz_attempts(
    quiz_id: int,
    count: int = 20,
    seed: Optional[int] = None,
    now: Optional[datetime] = None,
    user_count: int = 100,
    questions: Optional[Sequence[Question]] = None,
) -> List[QuizAttempt]:
    """
    Generate attempts for one quiz.

    When the quiz's questions are supplied, completed attempts answer exactly
    those questions and score against their points; otherwise ten synthetic
    two-point answers are used against a 20-point total.
    """
    rng = make_rng(f"attempts:{quiz_id}", seed)
    now = now or utcnow()
    if questions:
        total_points = sum(q.points for q in questions)
    else:
        total_points = DEFAULT_ATTEMPT_TOTAL_POINTS

    attempts = []
    for i in range(count):
        status = rng.choice(ATTEMPT_STATUS_WEIGHTS)
        started_at = _recent(rng, now, 7)
        attempt = dict(
            id=quiz_id * ATTEMPT_ID_FACTOR + i + 1,
            quiz_id=quiz_id,
            user_id=rng.randint(1, max(user_count, 1)),
            started_at=started_at,
            total_points=total_points,
            status=status,
        )
        if status == AttemptStatus.COMPLETED:
            answers = _synthesize_answers(rng, quiz_id, questions)
            score = sum(a.points_earned for a in answers)
            time_spent = sum(a.time_spent for a in answers)
            attempt.update(
                answers=answers,
                score=score,
                percentage=score_percentage(score, total_points),
                time_spent=time_spent,
                completed_at=started_at + timedelta(seconds=time_spent),
            )
        else:
            attempt["time_spent"] = rng.randint(300, 2099)
        attempts.append(QuizAttempt(**attempt))
    return attempts


GENERATORS = {
    "users": generate_users,
    "content": generate_content,
    "quizzes": generate_quizzes,
    "questions": generate_questions,
    "quiz_attempts": generate_quiz_attempts,
}


def generate(entity_type: str, count: int, seed: Optional[int] = None, **kwargs: Any) -> list:
    """Dispatch to the generator for ``entity_type``."""
    try:
        generator = GENERATORS[entity_type]
    except KeyError:
        raise ValueError(f"Unknown entity type: {entity_type}") from None
    if entity_type in ("questions", "quiz_attempts"):
        quiz_id = kwargs.pop("quiz_id", 1)
        return generator(quiz_id, count, seed, **kwargs)
    logger.debug(f"Generating {count} {entity_type} (seed={seed})")
    return generator(count, seed, **kwargs)
