"""
Built-in content catalog and the bulk replace used by POST /api/seed-content
and scripts/seed_content.py.

Replacing is destructive: comments, bookmarks and likes point at content
rows, so they are removed first.
"""
from typing import Optional

from sqlalchemy.orm import Session

from historybits.content.models import HistoricalContent, Comment, Bookmark, ContentLike

SEED_CONTENT: list[dict] = [
    {
        "title": "The Great Emu War",
        "period": "1930s",
        "category": "Military",
        "hook": "In 1932 the Australian army went to war against birds, and lost.",
        "content": (
            "After the First World War, veterans farming in Western Australia faced "
            "an invasion of some 20,000 emus that trampled their wheat. The government "
            "sent soldiers armed with Lewis guns.\n\n"
            "The emus scattered into small groups, outran the trucks and shrugged off "
            "bullets. After a month and thousands of rounds, the operation was called off."
        ),
        "takeaway": "Brute force rarely beats an opponent that refuses to fight on your terms.",
        "image_url": None,
    },
    {
        "title": "The Library of Alexandria Didn't Burn in a Day",
        "period": "Ancient Egypt",
        "category": "Culture",
        "hook": "The most famous library in history faded away slowly, not in one fire.",
        "content": (
            "Caesar's fire in 48 BC damaged warehouses near the harbor, but the "
            "library kept working for centuries afterwards.\n\n"
            "Its real decline came from shrinking budgets, purges of scholars and "
            "political turmoil under later rulers. By the time it vanished, few "
            "noticed it was gone."
        ),
        "takeaway": "Institutions usually die from neglect long before a dramatic ending.",
        "image_url": None,
    },
    {
        "title": "The Dancing Plague of 1518",
        "period": "Renaissance",
        "category": "Medicine",
        "hook": "In Strasbourg, hundreds of people danced for days and could not stop.",
        "content": (
            "It began with one woman, Frau Troffea, dancing in the street in July 1518. "
            "Within a month around 400 people had joined her.\n\n"
            "Authorities prescribed more dancing and even hired musicians. Historians "
            "now suspect mass psychogenic illness brought on by famine and stress."
        ),
        "takeaway": "Collective stress can show up in strange and contagious ways.",
        "image_url": None,
    },
    {
        "title": "Napoleon Was Not Short",
        "period": "19th Century",
        "category": "Politics",
        "hook": "The emperor stood about 5 feet 7 inches, average for his time.",
        "content": (
            "French inches were longer than English ones, so his recorded height of "
            "5'2\" in French units was misread abroad.\n\n"
            "British cartoonists seized on the error, drawing him as a tiny, "
            "tantrum-prone man. The image outlived the facts."
        ),
        "takeaway": "Propaganda sticks when it confirms what people want to believe.",
        "image_url": None,
    },
    {
        "title": "The Longest War Without a Shot",
        "period": "17th Century",
        "category": "Military",
        "hook": "The Netherlands and the Isles of Scilly were technically at war for 335 years.",
        "content": (
            "During the English Civil War the Dutch declared war on the Royalist-held "
            "Isles of Scilly in 1651. Nobody ever signed a peace.\n\n"
            "In 1986 a local historian noticed, and the Dutch ambassador visited to "
            "formally end the war."
        ),
        "takeaway": "Paperwork can outlast the conflicts it was written for.",
        "image_url": None,
    },
    {
        "title": "Cleopatra and the Moon Landing",
        "period": "Ancient Egypt",
        "category": "Culture",
        "hook": "Cleopatra lived closer in time to the Moon landing than to the Great Pyramid.",
        "content": (
            "The Great Pyramid of Giza was finished around 2560 BC. Cleopatra died in "
            "30 BC, roughly 2,500 years later.\n\n"
            "Apollo 11 landed in 1969, about 2,000 years after her death. Ancient "
            "Egypt was ancient even to the ancients."
        ),
        "takeaway": "Deep time is far deeper than our mental timelines suggest.",
        "image_url": None,
    },
    {
        "title": "The Boston Molasses Flood",
        "period": "1910s",
        "category": "Disasters",
        "hook": "In 1919 a wave of molasses swept through Boston at 35 miles per hour.",
        "content": (
            "A poorly built storage tank holding over 8 million liters of molasses "
            "burst on a warm January day.\n\n"
            "The sticky wave killed 21 people and injured 150. The lawsuit that "
            "followed helped establish stricter engineering standards."
        ),
        "takeaway": "Cutting corners on safety eventually costs more than doing it right.",
        "image_url": None,
    },
    {
        "title": "Oxford University Is Older Than the Aztec Empire",
        "period": "Middle Ages",
        "category": "Education",
        "hook": "Students were attending lectures at Oxford before Tenochtitlan was founded.",
        "content": (
            "Teaching at Oxford existed by 1096. The Aztec capital Tenochtitlan was "
            "founded in 1325.\n\n"
            "Institutions can outlive empires when they keep adapting to the people "
            "they serve."
        ),
        "takeaway": "Longevity comes from adaptation, not from size or power.",
        "image_url": None,
    },
    {
        "title": "The Shortest War in History",
        "period": "19th Century",
        "category": "Military",
        "hook": "The Anglo-Zanzibar War of 1896 lasted about 38 minutes.",
        "content": (
            "When a new sultan took power without British approval, Royal Navy ships "
            "issued an ultimatum.\n\n"
            "It expired at 9:00 am. By roughly 9:40 the palace was in ruins and the "
            "sultan had fled."
        ),
        "takeaway": "Overwhelming imbalance of power can end a conflict almost instantly.",
        "image_url": None,
    },
]


def replace_content(db: Session, items: Optional[list[dict]] = None) -> int:
    """Delete all content (and rows referencing it), insert `items` (default: SEED_CONTENT), commit."""
    if items is None:
        items = SEED_CONTENT

    db.query(Comment).delete(synchronize_session=False)
    db.query(Bookmark).delete(synchronize_session=False)
    db.query(ContentLike).delete(synchronize_session=False)
    db.query(HistoricalContent).delete(synchronize_session=False)

    db.add_all([HistoricalContent(**item) for item in items])
    db.commit()

    print(f"[SEED] content table replaced with {len(items)} rows", flush=True)
    return len(items)
