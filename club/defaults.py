"""
Reference rows every club starts with
"""

DEFAULT_COMPETITIONS = [
    'League Matches',
    'Derby Matches',
    'Cup Matches',
    'International Matches',
    'Qualification Matches',
    'Final Matches',
    'Friendly Matches',
]

# (name, primary colour, secondary colour)
DEFAULT_KIT_COLORS = [
    ('Home Green', '#059669', '#ffffff'),
    ('Away White', '#ffffff', '#059669'),
    ('Third Black', '#1f2937', '#f59e0b'),
]
