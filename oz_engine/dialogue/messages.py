"""
Wizard copy. Trauma-safe: never shaming, always redirecting.

Pools that are drawn from at random are lists; deterministic lookups are
keyed to exactly one (text, tone) entry.
"""

from oz_engine.models.dialogue import InterventionKey, OnboardingStage, Tone
from oz_engine.models.impulse import ImpulseType, RouteDestination
from oz_engine.models.load import Status

GREETINGS = {
    Status.STABLE: [
        "The city glows bright today. Ready for your next quest?",
        "Your RAM is stable. The tower sees great potential.",
        "Welcome back, traveler. The road awaits.",
        "Clear skies over Oz. A fine day to lay a brick.",
    ],
    Status.ELEVATED: [
        "Clouds are gathering. Let's focus on what matters.",
        "The wind picks up. Stay on the yellow brick road.",
        "Your mind carries weight today. Let me help lighten it.",
        "A little heavy today. One quest at a time.",
    ],
    Status.CRITICAL: [
        "Storm warnings in effect. Time to shelter some thoughts.",
        "The tower dims. Let's close some loops together.",
        "I sense turbulence. You're safe here.",
        "The city is straining. Let's pick one thing to finish.",
    ],
    Status.OVERLOAD: [
        "You've drifted far. Let's find our way back together.",
        "The tornado spins. But you are not lost.",
        "Gravity weakened. Let's stabilize.",
        "Too many lights are on. Let's switch a few off.",
    ],
}

GREETING_TONES = {
    Status.STABLE: Tone.ENCOURAGING,
    Status.ELEVATED: Tone.CALMING,
    Status.CRITICAL: Tone.WARNING,
    Status.OVERLOAD: Tone.WARNING,
}

COMPLETIONS = [
    "A quest fulfilled! The city shines brighter.",
    "The yellow brick road extends. You've earned this step.",
    "One less open loop. Feel that relief.",
    "Victory! Your RAM thanks you.",
    "A task closes. Space opens. Well done.",
    "The Wizard sees your progress. The city celebrates.",
]

ONBOARDING = {
    OnboardingStage.DAY1: (
        "Day one. Your storm is sorted and your first quest is waiting.",
        Tone.ENCOURAGING,
    ),
    OnboardingStage.DAY2: (
        "Day two. Let's look at how you tend to drift. No judgment, just patterns.",
        Tone.CALMING,
    ),
    OnboardingStage.DAY3: (
        "Day three. The Void is open now. Drifting there is not a failure.",
        Tone.CALMING,
    ),
    OnboardingStage.DAY4: (
        "Day four. That fire in you is fuel. Let's burn it on purpose.",
        Tone.ENCOURAGING,
    ),
    OnboardingStage.DAY5: (
        "Day five. Tin Man, Lion and Toto are ready to take your thoughts.",
        Tone.ENCOURAGING,
    ),
    OnboardingStage.DAY6: (
        "Day six. Your city can grow. Every quest adds a building.",
        Tone.ENCOURAGING,
    ),
    OnboardingStage.DAY7: (
        "Day seven. This city is yours. You built it.",
        Tone.CELEBRATING,
    ),
    OnboardingStage.TORNADO: (
        "Something brilliant just landed in my world. Let's sort your storm.",
        Tone.ENCOURAGING,
    ),
    OnboardingStage.SORTING: (
        "Your storm has shape. Let me show you what weighs the most.",
        Tone.ENCOURAGING,
    ),
    OnboardingStage.FIRST_CITY: (
        "Welcome to your Emerald City. These buildings are yours.",
        Tone.ENCOURAGING,
    ),
    OnboardingStage.FIRST_QUEST: (
        "Every journey starts with one step. Here's your first quest.",
        Tone.ENCOURAGING,
    ),
    OnboardingStage.ENCOURAGEMENT: (
        "You are not broken. Your OS just needed a reboot.",
        Tone.ENCOURAGING,
    ),
}

DEFAULT_ONBOARDING_STAGE = OnboardingStage.ENCOURAGEMENT

INTERVENTIONS = {
    InterventionKey.NEW_PROJECT: (
        "A new quest beckons. But first, let Toto sniff it out.",
        Tone.WARNING,
    ),
    InterventionKey.OVERLOAD: (
        "Your RAM overflows. Time to let something go.",
        Tone.WARNING,
    ),
    InterventionKey.DELAY: (
        "This thought is captured. We'll revisit when the time is right.",
        Tone.CALMING,
    ),
    InterventionKey.ROUTE: (
        "Let's hand this to the friend who knows it best.",
        Tone.CALMING,
    ),
    InterventionKey.BLOCK: (
        "Not this one, not now. What you've built deserves protecting.",
        Tone.WARNING,
    ),
    InterventionKey.PROCEED: (
        "Toto approves. Go ahead, and keep your quest in sight.",
        Tone.ENCOURAGING,
    ),
    InterventionKey.DRIFT: (
        "You've wandered from the road. Let's find it again.",
        Tone.CALMING,
    ),
    InterventionKey.VOID: (
        "You've drifted into the void between stars. What were you reaching for?",
        Tone.CALMING,
    ),
    InterventionKey.CONTROLLED_BURN: (
        "Chaos is just energy without direction. Let's aim it.",
        Tone.ENCOURAGING,
    ),
}

DEFAULT_INTERVENTION = (
    "Let's pause and look at this together.",
    Tone.NEUTRAL,
)

STATUS_TONES = GREETING_TONES

TOTO_RESPONSES = {
    Status.OVERLOAD: [
        "🐕 *growls* The city is overloaded! No new projects allowed right now.",
        "🐕 Toto blocks your path. Too many open loops!",
        "🐕 *barks urgently* RAM critical! Close something first!",
    ],
    Status.CRITICAL: [
        "🐕 *whimpers* Are you sure? The city is straining...",
        "🐕 Toto looks concerned. Maybe finish something first?",
        "🐕 *tilts head* This feels like a distraction to me...",
    ],
    Status.ELEVATED: [
        "🐕 *sniffs* Proceed carefully. Your load is building.",
        "🐕 Toto is watching. Make sure this is intentional.",
    ],
    Status.STABLE: [
        "🐕 *wags tail* Looks safe! Go ahead if it's aligned with your quest.",
        "🐕 Toto approves. Your RAM is stable.",
    ],
}

IMPULSE_QUESTIONS = {
    ImpulseType.PROJECT: "Is starting a new project right now a real quest or a dopamine trap?",
    ImpulseType.TASK: "Is this task helping your current mission or distracting from it?",
    ImpulseType.IDEA: "Is this idea worth capturing or just mental noise?",
    ImpulseType.PURCHASE: "Is this purchase for the quest, or for the feeling?",
    ImpulseType.MESSAGE: "Is this message urgent, or is the worry talking?",
    ImpulseType.RESEARCH: "Will this research move the quest, or just the tabs?",
    ImpulseType.REORGANIZE: "Does the plan need changing, or does deciding feel hard right now?",
    ImpulseType.ABANDON: "Are you letting this go on purpose, or walking away from the storm?",
    ImpulseType.OTHER: "Is this action moving you forward or sideways?",
}

SUBSYSTEM_RESPONSES = {
    RouteDestination.TINMAN: [
        "That weight you carry has a name. Naming it lessens its gravity.",
        "Emotions are data, not commands. Let me help you decode this signal.",
        "Your heart is not broken. It is recalibrating.",
        "Feel it fully. Then we move forward.",
        "This storm will pass. You are not the weather.",
    ],
    RouteDestination.SCARECROW: [
        "Let's break this into smaller pieces. Complexity shrinks under scrutiny.",
        "Your brain is not failing. It's processing too many threads. Let's close some.",
        "First principles: What is actually true here?",
        "The fog will clear. Let's find one clear step forward.",
        "You already know the answer. Let's uncover it together.",
    ],
    RouteDestination.LION: [
        "Fear is just excitement without breath. Breathe.",
        "You've survived every difficult day so far. That's a 100% success rate.",
        "Courage is not the absence of fear. It's taking one step while afraid.",
        "This fear is protecting something valuable. Let's find what.",
        "The thing you're avoiding contains the growth you need.",
    ],
    RouteDestination.DOROTHY: [
        "You don't have to decide everything. Just the next step.",
        "Pick one path. The others will still be there tomorrow.",
        "Good enough and done beats perfect and waiting.",
        "You've clicked your heels before. Trust the choice you make.",
    ],
}

CALMING_PHRASES = [
    "You are not broken. Your OS just needs a reboot.",
    "One brick at a time builds the whole road.",
    "The Wizard believes in you. Now believe in yourself.",
    "Chaos is just energy without direction.",
    "Close a loop. Feel the relief.",
    "Your brain is powerful. Let's aim it.",
    "Not every idea needs action today.",
    "Progress over perfection. Always.",
    "The Emerald City is waiting. You'll get there.",
]
