from collections import namedtuple

# -------------------------------------------------------------------
# Fixed ad structure
AD_LANGUAGE = "Marathi"
AD_DURATION_SECONDS = 30

Beat = namedtuple("Beat", ["cue", "guidance"])

SCRIPT_BEATS = (
    Beat("[soft, emotional]", "2 lines showing emotional problem"),
    Beat("[hopeful]", "1 reassuring transition line"),
    Beat("[happy, energetic]", "Introduce the solution and how it works (2–3 lines)"),
    Beat("[confident]", "Benefits and results (1–2 lines)"),
    Beat("[strong, energetic]", "Clear call to action (1–2 lines)"),
)
# -------------------------------------------------------------------

PROMPT_RULES = (
    "FOLLOW THIS EXACT STRUCTURE",
    "Use emotion cues ONLY in SQUARE BRACKETS",
    "Emotion cues must be in ENGLISH",
    "Do NOT use emojis",
    "Do NOT change the order",
    f"Simple, spoken {AD_LANGUAGE}",
    "Suitable for audio / radio ads",
)


def build_prompt(business_name: str, service: str, target_audience: str) -> str:
    """
    Builds the instruction sent to the text generation model.
    Inputs are appended verbatim at the end under labeled fields.
    """
    rules = "\n".join(f"- {rule}" for rule in PROMPT_RULES)
    structure = "\n\n".join(f"{beat.cue}\n{beat.guidance}" for beat in SCRIPT_BEATS)

    return (
        f"Generate a {AD_DURATION_SECONDS}-second {AD_LANGUAGE} audio advertisement script.\n"
        "\n"
        "MANDATORY RULES:\n"
        f"{rules}\n"
        "\n"
        "STRUCTURE (DO NOT CHANGE):\n"
        f"{structure}\n"
        "\n"
        f"Business Name: {business_name}\n"
        f"Service / App Purpose: {service}\n"
        f"Target Audience: {target_audience}\n"
    )


def fallback_script(business_name: str, service: str, target_audience: str) -> str:
    """
    Ready-to-use script returned when generation fails.
    Follows the same beats as the generated script; target_audience is not used.
    """
    lines = (
        (
            "व्यवसाय वाढवायचा आहे…",
            "पण दररोज आकर्षक पोस्ट बनवायला वेळच मिळत नाही?",
        ),
        (
            "पण आता ही चिंता मागे ठेवा…",
        ),
        (
            "आता काळजी सोडा!",
            f"{business_name} सोबत {service} झाले अगदी सोपे.",
            "नाव, फोटो आणि माहिती टाका —",
            "आणि तयार सुंदर पोस्ट, एका क्लिकमध्ये!",
        ),
        (
            "तुमचा ब्रँड दिसेल प्रोफेशनल",
            "आणि ग्राहकही होतील अधिक आकर्षित!",
        ),
        (
            f"आजच डाउनलोड करा {business_name}",
            "आणि तुमच्या व्यवसायाला द्या नवी दिशा!",
        ),
    )

    sections = [
        "\n".join((beat.cue,) + beat_lines)
        for beat, beat_lines in zip(SCRIPT_BEATS, lines)
    ]
    return "\n\n".join(sections).strip()
