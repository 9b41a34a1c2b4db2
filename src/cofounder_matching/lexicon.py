"""Keyword lexicon: the vocabulary every text signal is read through.

Plain data, no logic.  Interview answers are short and informal, so the
lists are deliberately coarse; extractors treat "no hit" as missing signal
rather than as a negative answer.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Skills: synonym groups treated as equivalent
# ---------------------------------------------------------------------------

SKILL_SYNONYM_GROUPS: list[list[str]] = [
    # engineering (general)
    [
        "tech", "technical", "engineering", "engineer", "developer", "development",
        "code", "coding", "software", "programming", "full-stack", "fullstack",
        "full stack", "backend", "back-end", "back end",
    ],
    # frontend
    [
        "frontend", "front-end", "front end", "react", "react.js", "reactjs",
        "vue", "vue.js", "vuejs", "angular", "svelte", "next.js", "nextjs",
        "html", "css", "javascript", "typescript", "ui development",
    ],
    # mobile
    [
        "mobile", "ios", "android", "react native", "flutter", "swift", "kotlin",
        "mobile development", "app development",
    ],
    # design
    [
        "design", "designer", "ux", "ui", "ux/ui", "ui/ux", "user experience",
        "user interface", "product design", "visual design", "graphic design",
        "web design",
    ],
    # product
    [
        "product", "product management", "pm", "product manager", "product owner",
        "product strategy",
    ],
    # data / ai
    [
        "data", "data science", "data engineering", "data analyst", "analytics",
        "machine learning", "ml", "ai", "artificial intelligence", "deep learning",
        "nlp", "computer vision", "llm",
    ],
    # sales / bd
    [
        "sales", "business development", "bd", "account management",
        "enterprise sales", "b2b sales", "partnerships",
    ],
    # marketing / growth
    [
        "marketing", "growth", "growth hacking", "digital marketing",
        "content marketing", "seo", "sem", "acquisition", "user acquisition",
        "brand", "branding",
    ],
    # operations / strategy
    [
        "ops", "operations", "strategy", "business strategy", "coo",
        "supply chain", "logistics",
    ],
    # finance
    [
        "finance", "financial", "accounting", "cfo", "fundraising",
        "investor relations", "financial modeling", "bookkeeping",
    ],
    # devops / infrastructure
    [
        "devops", "infrastructure", "cloud", "aws", "gcp", "azure", "sre",
        "site reliability", "ci/cd", "docker", "kubernetes",
    ],
    # web3
    [
        "blockchain", "web3", "crypto", "smart contracts", "solidity",
        "defi", "nft",
    ],
    # legal
    ["legal", "lawyer", "compliance", "regulatory", "ip", "intellectual property"],
    # people
    ["hr", "human resources", "people", "recruiting", "talent", "people operations"],
]

# ---------------------------------------------------------------------------
# Communication spectra (high pole, low pole)
# ---------------------------------------------------------------------------

DIRECTNESS_DIRECT = [
    "direct", "blunt", "straightforward", "no-nonsense", "no nonsense",
    "candid", "frank", "tell it like it is", "honest feedback",
    "radical candor", "transparent", "upfront", "cut to the chase",
    "no sugarcoating", "tough love",
]

DIRECTNESS_GENTLE = [
    "gentle", "careful", "thoughtful", "diplomatic", "empathetic",
    "considerate", "supportive", "encouraging", "patient",
    "non-confrontational", "avoid conflict", "harmony", "consensus",
    "sensitive", "tactful",
]

STRUCTURE_STRUCTURED = [
    "structured", "organized", "process", "systematic", "methodical",
    "documented", "planning", "roadmap", "sprint", "standup", "stand-up",
    "meetings", "agenda", "clear roles", "defined", "rigorous",
    "disciplined", "framework",
]

STRUCTURE_FLEXIBLE = [
    "flexible", "scrappy", "ad hoc", "ad-hoc", "informal", "loose",
    "unstructured", "go with the flow", "figure it out", "startup mode",
    "move fast", "break things", "iterate", "pivot", "experiment",
    "chaos", "adaptive",
]

COLLAB_ASYNC = [
    "async", "asynchronous", "independent", "autonomous", "solo",
    "self-directed", "heads down", "deep work", "remote", "written",
    "documentation", "slack", "email", "own pace", "minimal meetings",
    "fewer meetings",
]

COLLAB_SYNC = [
    "sync", "synchronous", "collaborative", "pair", "pairing",
    "co-working", "in-person", "face to face", "face-to-face",
    "real-time", "real time", "whiteboard", "brainstorm", "together",
    "team", "daily standup", "huddle", "call", "video",
]

# ---------------------------------------------------------------------------
# Value axes: (high side, low side)
# ---------------------------------------------------------------------------

PACE_FAST = [
    "move fast", "rapid", "quick", "agile", "sprint-based", "hustle",
    "bias for action", "ship fast", "iterate quickly", "velocity",
    "aggressive timeline", "move quickly", "fast-paced", "high tempo",
    "ship it", "get it out",
]
PACE_DELIBERATE = [
    "deliberate", "careful", "thoughtful", "methodical", "thorough",
    "measured", "strategic", "planned", "systematic", "quality over speed",
    "take time", "do it right", "no rush", "marathon not sprint",
    "sustainable pace", "long-term", "patient",
]

RISK_HIGH = [
    "high risk", "bold", "ambitious", "moonshot", "swing big", "all in",
    "big bet", "aggressive growth", "take chances", "disruptive", "10x",
    "go big or go home", "risk taker", "venture scale", "big swings",
]
RISK_LOW = [
    "conservative", "cautious", "safe", "stable", "steady", "sustainable growth",
    "bootstrap", "profitable", "low burn", "capital efficient", "risk averse",
    "measured risk", "calculated", "pragmatic", "sensible",
]

DECISION_DATA = [
    "data-driven", "data driven", "metrics", "analytics", "evidence",
    "numbers", "quantitative", "measure", "ab test", "a/b test",
    "experiment", "hypothesis", "validate", "research", "kpis",
]
DECISION_INTUITION = [
    "intuition", "gut", "instinct", "vision-driven", "feel", "creative",
    "artistic", "taste", "conviction", "belief", "qualitative", "my gut",
]

AUTONOMY_AUTONOMOUS = [
    "autonomous", "independent", "self-directed", "ownership",
    "trust each other", "async", "asynchronous", "remote-first", "flexible hours",
    "work alone", "solo", "hands-off", "freedom", "self-starter",
]
AUTONOMY_COLLABORATIVE = [
    "collaborative", "team-first", "together", "pair programming", "sync",
    "synchronous", "standup", "alignment", "consensus", "collective", "co-create",
    "in-person", "office", "face to face", "hands-on", "close collaboration",
]

WORKLIFE_INTENSE = [
    "intense", "24/7", "all-in", "whatever it takes", "grind",
    "no work-life balance", "startup life", "sacrifice",
    "nights and weekends", "obsessed", "hustle culture", "always on",
]
WORKLIFE_BALANCED = [
    "work-life balance", "sustainable", "healthy pace", "boundaries", "family time",
    "marathon not sprint", "long term thinking", "avoid burnout", "wellness",
    "mental health", "reasonable hours", "sustainable pace",
]

VALUE_AXES: dict[str, tuple[list[str], list[str]]] = {
    "pace": (PACE_FAST, PACE_DELIBERATE),
    "risk": (RISK_HIGH, RISK_LOW),
    "decision": (DECISION_DATA, DECISION_INTUITION),
    "autonomy": (AUTONOMY_AUTONOMOUS, AUTONOMY_COLLABORATIVE),
    "worklife": (WORKLIFE_INTENSE, WORKLIFE_BALANCED),
}

# Iteration order doubles as the tie-break order.
EQUITY_PATTERNS: dict[str, list[str]] = {
    "equal": [
        "equal", "50/50", "fifty fifty", "split evenly", "same equity",
        "fair split", "even split",
    ],
    "contribution_based": [
        "contribution", "merit", "based on work", "earn", "vest",
        "performance", "value added", "proportional",
    ],
    "flexible": [
        "flexible", "open", "negotiate", "discuss", "depends", "case by case",
        "figure it out", "talk about it",
    ],
    "clear_majority": [
        "majority", "control", "ceo gets more", "founder gets more",
        "idea person", "my idea",
    ],
}

# ---------------------------------------------------------------------------
# Vision: industry verticals and customer segments
# ---------------------------------------------------------------------------

INDUSTRY_GROUPS: list[list[str]] = [
    # fintech
    [
        "fintech", "banking", "payments", "lending", "credit",
        "insurance", "insurtech", "wealth management", "investment", "trading", "crypto",
        "blockchain", "defi", "neobank", "financial services",
    ],
    # health
    [
        "healthcare", "medical", "biotech", "pharma", "clinical",
        "telemedicine", "telehealth", "mental health",
        "healthtech", "medtech", "diagnostics", "therapeutics", "patient care",
    ],
    # commerce
    [
        "ecommerce", "e-commerce", "retail", "shopping", "marketplace",
        "dtc", "d2c", "direct to consumer", "cpg", "subscription box",
    ],
    # saas / enterprise
    [
        "saas", "b2b saas", "enterprise software",
        "workflow automation", "crm", "erp", "hr tech", "hrtech",
        "sales enablement", "marketing automation",
    ],
    # education
    [
        "edtech", "e-learning", "online learning", "training platform",
        "tutoring", "upskilling", "bootcamp", "lms", "learning management",
    ],
    # ai / ml
    [
        "artificial intelligence", "machine learning", "ml platform",
        "llm", "gpt", "nlp", "computer vision", "deep learning", "generative ai",
        "ai-powered", "neural network",
    ],
    # developer tools
    [
        "devtools", "developer tools", "api platform", "infrastructure",
        "devops", "open source", "sdk", "developer experience",
        "no-code", "low-code",
    ],
    # media
    [
        "media company", "content platform", "creator economy", "video platform",
        "streaming", "podcast", "entertainment", "gaming",
        "social media", "influencer",
    ],
    # real estate
    [
        "real estate", "proptech", "property management", "housing",
        "mortgage", "construction tech", "commercial real estate",
    ],
    # logistics
    [
        "logistics", "supply chain", "shipping", "freight",
        "warehouse", "fulfillment", "last mile", "fleet management",
    ],
    # climate
    [
        "climate tech", "cleantech", "sustainability", "renewable energy",
        "carbon", "solar", "ev", "electric vehicle", "green tech",
    ],
    # food / agriculture
    [
        "foodtech", "agtech", "agriculture", "farming tech",
        "food delivery", "meal kit", "grocery tech",
    ],
    # legal
    [
        "legaltech", "legal tech", "compliance", "regulatory tech",
        "contract management",
    ],
    # future of work
    [
        "hr tech", "hrtech", "recruiting platform", "talent platform",
        "remote work", "future of work", "payroll",
    ],
]

CUSTOMER_SEGMENTS: dict[str, list[str]] = {
    "smb": [
        "smb", "small business", "small businesses", "sme", "local business",
        "mom and pop", "startups", "early-stage",
    ],
    "enterprise": [
        "enterprise", "large companies", "fortune 500", "corporations",
        "large organizations",
    ],
    "consumer": [
        "consumer", "b2c", "individual", "personal", "everyday people",
        "general public", "users",
    ],
    "prosumer": [
        "prosumer", "power user", "professional", "freelancer", "creator",
        "solopreneur",
    ],
    "developer": [
        "developer", "engineer", "technical", "devs", "programmers", "builders",
    ],
    "healthcare_providers": [
        "doctor", "physician", "nurse", "clinic", "hospital", "provider",
        "practitioner",
    ],
    "students": ["student", "learner", "university", "college", "school"],
}

# ---------------------------------------------------------------------------
# Unfair advantages (read from background + superpower)
# ---------------------------------------------------------------------------

ADVANTAGE_CUES: dict[str, list[str]] = {
    "domain_expertise": ["expert", "years in", "specialist"],
    "network": ["network", "connections", "contacts", "relationships"],
    "technical": ["engineer", "technical", "developer", "architect"],
    "business": ["sales", "business", "revenue", "deals"],
}

# ---------------------------------------------------------------------------
# Stage / urgency buckets (first match wins)
# ---------------------------------------------------------------------------

STAGE_CUES: list[tuple[str, list[str]]] = [
    ("idea", [
        "idea", "ideas", "ideation", "validation", "validating", "exploring",
        "pre-revenue", "pre revenue", "pre-launch", "pre launch", "pre-product",
    ]),
    ("mvp", ["mvp", "building", "prototype", "beta"]),
    ("launched", ["launch", "launched", "launching", "live", "revenue"]),
    ("scaling", ["scale", "scaling", "scaled", "growth", "series"]),
]

# No bare "now": it occurs in "not right now" and "unknown".
URGENCY_CUES: list[tuple[str, list[str]]] = [
    ("asap", ["asap", "immediately", "urgent", "urgently", "right away"]),
    ("soon", ["soon", "month", "months", "week", "weeks"]),
]

# ---------------------------------------------------------------------------
# Dealbreakers
# ---------------------------------------------------------------------------

DEALBREAKER_COMMITMENT_CUES = ["full-time", "full time"]
DEALBREAKER_LOCATION_CUES = ["local", "in-person", "in person", "same city"]
DEALBREAKER_DOMAIN_CUES = ["experience in", "background in", "domain"]
DEALBREAKER_SKILL_CUES = ["must have", "need", "require"]

DEALBREAKER_SKILLS = [
    "engineer", "engineering", "developer", "development",
    "design", "designer", "product",
    "marketing", "growth", "sales",
    "technical", "business", "finance",
    "operations", "ops", "data",
    "machine learning", "ml", "ai",
]

DEALBREAKER_DOMAINS = [
    "healthcare", "health", "medical",
    "fintech", "finance", "banking",
    "saas", "b2b", "enterprise",
    "consumer", "marketplace", "ecommerce",
    "crypto", "blockchain", "web3",
    "ai", "machine learning", "data",
    "education", "edtech",
    "climate", "sustainability",
]

KNOWN_CITIES = [
    "san francisco", "sf", "new york", "nyc", "london", "berlin", "austin",
    "seattle", "boston", "los angeles", "la",
]
