# Per-option scores (0-100) for choice questions, in the same order as the
# question's options. Scores reflect correctness/alignment with the role,
# not selection order. Questions missing here score NEUTRAL_OPTION_SCORE.
NEUTRAL_OPTION_SCORE = 50

OPTION_SCORES = {
    "psych_3": [75, 85, 65, 70],              # Problem-solving approach
    "psych_5": [90, 30, 50, 40],              # Technology interests
    "tech_1": [20, 100, 10, 15],              # Edge computing advantage
    "tech_2": [0, 100, 10, 50],               # Distributed systems
    "aptitude_1": [0, 0, 100, 0],             # Latency calculation
    "tech_3": [20, 100, 60, 30],              # Smart factory scenario
    "wiscar_interest_2": [100, 20, 40, 30],   # Interesting scenarios
    "wiscar_skill_1": [100, 75, 50, 25],      # Linux comfort
    "wiscar_cognitive_1": [100, 80, 70, 85],  # Design approach
    "wiscar_real_world_1": [100, 70, 60, 80]  # Important skills
}
