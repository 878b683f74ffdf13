"""Display icons for movie titles"""

DEFAULT_ICON = '🎬'

# Checked in order; the first keyword found in the title wins
TITLE_KEYWORD_ICONS = [
    ('pirate', '🏴‍☠️'),
    ('space', '🚀'),
    ('star', '⭐'),
    ('prison', '🔒'),
    ('escape', '🏃'),
    ('family', '👨‍👩‍👧'),
    ('boss', '🕴️'),
    ('hero', '🦸'),
    ('knight', '🦇'),
    ('dragon', '🐉'),
    ('ocean', '🌊'),
    ('sea', '🌊'),
    ('mountain', '🏔️'),
    ('robot', '🤖'),
    ('dream', '💭'),
    ('time', '⏳'),
    ('love', '❤️'),
    ('war', '⚔️'),
    ('ghost', '👻'),
    ('city', '🌆'),
    ('mystery', '🔍'),
    ('treasure', '💰'),
]


def get_movie_icon(title):
    if not title or not title.strip():
        return DEFAULT_ICON

    lowered = title.lower()
    for keyword, icon in TITLE_KEYWORD_ICONS:
        if keyword in lowered:
            return icon

    return DEFAULT_ICON
