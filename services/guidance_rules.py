# services/guidance_rules.py
"""
Deterministic text rules applied to a set of category scores.

Each rule table is plain data so the wording can change without touching
the scoring code in services/scoring_service.py.
"""
from models.assessment import LearningPath

# (score path, comparison, threshold, message), evaluated in order.
# Rules are independent; any number of them may match.
INSIGHT_RULES = [
    ('psychometric', '>=', 75,
     "Your personality profile shows strong alignment with edge cloud architecture roles."),
    ('technical', '>=', 70,
     "You demonstrate solid technical understanding of edge computing concepts."),
    ('technical', '<', 50,
     "Consider building foundational knowledge in networking and distributed systems."),
    ('wiscar.interest', '>=', 80,
     "Your strong interest in edge technologies is a significant advantage."),
    ('wiscar.cognitive', '>=', 75,
     "Your problem-solving approach is well-suited for complex system design."),
]

NEXT_STEPS = {
    'yes': [
        "Begin with edge computing fundamentals and networking courses",
        "Set up a home lab with Raspberry Pi or edge devices",
        "Explore Azure IoT Edge or AWS IoT Greengrass",
        "Join edge computing communities and forums",
    ],
    'maybe': [
        "Strengthen foundational skills in networking and cloud computing",
        "Complete introductory courses in distributed systems",
        "Gain hands-on experience with Linux and containerization",
        "Reassess in 2-3 months after building these skills",
    ],
    'no': [
        "Consider starting with general cloud computing or DevOps",
        "Build programming and system administration skills",
        "Explore related fields that match your strengths better",
    ],
}

# (score path, threshold, roles) - each satisfied rule adds its roles in order
CONDITIONAL_ROLES = [
    ('technical', 60, ["Cloud Solutions Architect", "DevOps Engineer"]),
    ('psychometric', 70, ["IoT Product Manager", "Technical Project Manager"]),
]
BASE_ROLES = ["Site Reliability Engineer", "Network Engineer"]

LEARNING_PATH = LearningPath(
    beginner=(
        "Cloud Computing Fundamentals",
        "Networking Basics (TCP/IP, DNS)",
        "Linux Command Line Essentials",
        "Introduction to Containerization",
    ),
    intermediate=(
        "Distributed Systems Architecture",
        "Edge Computing with AWS/Azure",
        "Kubernetes and Container Orchestration",
        "IoT Device Management",
    ),
    advanced=(
        "Real-time Systems Design",
        "Edge AI and Machine Learning",
        "5G Network Integration",
        "Edge Security Architecture",
    ),
)


def _score_at(scores, path):
    """Resolve 'technical' or 'wiscar.interest' against a CategoryScores."""
    category, _, dimension = path.partition('.')
    value = getattr(scores, category)
    if dimension:
        value = value.to_dict()[dimension]
    return value


def generate_insights(scores):
    insights = []
    for path, op, threshold, message in INSIGHT_RULES:
        value = _score_at(scores, path)
        matched = value >= threshold if op == '>=' else value < threshold
        if matched:
            insights.append(message)
    return insights


def generate_next_steps(recommendation):
    return list(NEXT_STEPS[recommendation])


def generate_alternative_roles(scores):
    roles = []
    for path, threshold, extra in CONDITIONAL_ROLES:
        if _score_at(scores, path) >= threshold:
            roles.extend(extra)
    roles.extend(BASE_ROLES)
    return roles


def generate_learning_path(scores):
    # Same path for everyone; scores accepted so a tailored path can slot in here
    return LEARNING_PATH
