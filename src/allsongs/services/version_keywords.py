"""
Keyword lists for alternate-version detection.

Matching is a plain case-insensitive substring test on the part of a title
after its first "-" or "(". The lists are heuristic: short entries such as
"mix", "edit", "club" or "fix" also match inside ordinary words.
"""

# Suffix substrings marking a non-canonical variant of a recording
ALTERNATE_VERSION_KEYWORDS = [
    'version',
    'live',
    'remix',
    'edit',
    'acoustic',
    'stripped',
    'session',
    'sessions',
    'demo',
    'acapella',
    'a cappella',
    'memo',
    'track by track',
    'mix',
    'recorded at',
    'instrumental',
    'orchestral',
    'spotify singles',
    'commentary',
    'extended',
    'sped up',
    'slowed',
    'voicenote',
    'club',
    'dub',
    'radio',
    'fix',
]

# Suffix substrings that mark a canonical re-recording, never an alternate
# (e.g. "Love Story (Taylor's Version)")
ALTERNATE_VERSION_EXCEPTIONS = [
    'taylor',
]

# Characters that separate a base title from its version suffix
TITLE_DELIMITERS = ('-', '(')
