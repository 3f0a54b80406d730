"""
Constants Module
File names and the closed vocabularies used to classify selectors and at-rules.
"""

LOG_FILE_NAME = 'log.txt'
DEFAULT_OUTPUT_FILE = 'complexity.json'

# At-rule keywords (without the leading @)
AT_RULE_TYPES = [
    'charset',
    'counter-style',
    'document',
    'font-face',
    'font-feature-values',
    'import',
    'keyframes',
    'layer',
    'media',
    'name-space',
    'page',
    'property',
    'scope',
    'starting-style',
    'supports',
]

# At-rules whose prelude is a condition rather than a name
CONDITIONAL_AT_RULE_TYPES = ['media', 'scope', 'starting-style', 'supports', 'document']

MEDIA_FEATURES = [
    'all',
    'aural',
    'braille',
    'embossed',
    'handheld',
    'print',
    'projection',
    'screen',
    'tty',
    'tv',
    'presentation',
]

AT_RULE_OPERATORS = ['and', 'not', 'only', 'or', ',']

FUNCTIONAL_PSEUDO_CLASSES = ['is', 'where', 'has', 'not']

SELECTOR_COMBINATORS = ['~', '>', '+']
