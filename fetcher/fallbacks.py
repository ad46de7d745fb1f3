"""Hard-coded payloads served when a site document cannot be loaded."""
import copy
from typing import Any, Dict

EVENTS_DOCUMENT = 'events.json'
PROJECTS_DOCUMENT = 'projects.json'
NEWS_DOCUMENT = 'news.json'
TEAM_DOCUMENT = 'team.json'
WINNERS_DOCUMENT = 'winners.json'
WPOTY_CONFIG_DOCUMENT = 'wpoty-config.json'

WINNERS_IMAGE_BASE = 'https://dm7ldj21i44fm.cloudfront.net/img/winners'

FALLBACK_EVENTS = {'events': []}

FALLBACK_PROJECTS = {'events': []}

FALLBACK_NEWS = [
    {
        'id': 1,
        'newsId': 'leopard-population-discovery',
        'image': 'https://images.unsplash.com/photo-1506905925346-21bda4d32df4?auto=format&fit=crop&w=600&q=80',
        'title': 'New Leopard Population Discovered in Yala National Park',
        'description': (
            'Conservationists have identified a previously unknown population '
            'of Sri Lankan leopards in the remote regions of Yala National Park.'
        ),
        'date': '2024-12-15',
        'author': 'Wild Sri Lanka Team',
        'category': 'Conservation',
        'tags': ['leopard', 'yala', 'conservation', 'wildlife'],
    },
    {
        'id': 2,
        'newsId': 'wildlife-photography-workshop-2025',
        'image': 'https://images.unsplash.com/photo-1518717758536-85ae29035b6d?auto=format&fit=crop&w=600&q=80',
        'title': 'Wildlife Photography Workshop Announced for March 2025',
        'description': (
            "Join our expert photographers for an immersive 5-day workshop in "
            "the heart of Sri Lanka's wilderness."
        ),
        'date': '2024-12-12',
        'author': 'Wild Sri Lanka Team',
        'category': 'Workshop',
        'tags': ['photography', 'workshop', 'wildlife', 'training'],
    },
    {
        'id': 3,
        'newsId': 'elephant-corridor-restoration',
        'image': 'https://images.unsplash.com/photo-1506744038136-46273834b3fb?auto=format&fit=crop&w=600&q=80',
        'title': 'Conservation Success: Elephant Corridor Restoration Complete',
        'description': (
            'The restoration of the ancient elephant migration corridor between '
            'Minneriya and Kaudulla National Parks has been completed.'
        ),
        'date': '2024-12-10',
        'author': 'Wild Sri Lanka Team',
        'category': 'Conservation',
        'tags': ['elephant', 'corridor', 'conservation', 'migration'],
    },
]

FALLBACK_TEAM = {
    'boardOfficials': [
        {
            'id': 'niro-genzarry-president',
            'name': 'Niro Genzarry',
            'position': 'President',
            'email': 'nina.genzarry@team.collection',
            'image': 'https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?auto=format&fit=crop&w=400&q=80',
        },
        {
            'id': 'clara-huel-vice-president',
            'name': 'Clara Huel',
            'position': 'Vice President',
            'email': 'clara.huel@team.collection',
            'image': 'https://images.unsplash.com/photo-1494790108755-2616b612b786?auto=format&fit=crop&w=400&q=80',
        },
        {
            'id': 'max-collins-secretary',
            'name': 'Max Collins',
            'position': 'Secretary',
            'email': 'm.collins@team.collection',
            'image': 'https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?auto=format&fit=crop&w=400&q=80',
        },
    ],
    'moderaTeam': [
        {
            'id': 'niro-genzarry-moderator-1',
            'name': 'Niro Genzarry',
            'email': 'nina.genzarry@team.collection',
            'image': 'https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?auto=format&fit=crop&w=400&q=80',
        },
        {
            'id': 'clara-huel-moderator-1',
            'name': 'Clara Huel',
            'email': 'clara.huel@team.collection',
            'image': 'https://images.unsplash.com/photo-1494790108755-2616b612b786?auto=format&fit=crop&w=400&q=80',
        },
        {
            'id': 'max-collins-moderator-1',
            'name': 'Max Collins',
            'email': 'm.collins@team.collection',
            'image': 'https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?auto=format&fit=crop&w=400&q=80',
        },
    ],
}

FALLBACK_WINNERS = {
    '2024': {
        'Open': [
            {
                'name': 'Chitral Rajiv Jayatilake',
                'category': 'Winner - Lunging for Life',
                'image': f'{WINNERS_IMAGE_BASE}/2024/open/open-2024-1.png',
                'competitionCategory': 'Open',
            },
            {
                'name': 'Sujeewa Nishantha Mallawaarachchi',
                'category': '1st runners-Up - Feeding Time',
                'image': f'{WINNERS_IMAGE_BASE}/2024/open/open-2024-2.png',
                'competitionCategory': 'Open',
            },
            {
                'name': 'Samith Chandula Perera',
                'category': '2nd runners-Up - Under the Wings of Danger',
                'image': f'{WINNERS_IMAGE_BASE}/2024/open/open-2024-3.png',
                'competitionCategory': 'Open',
            },
        ],
        'Junior': [
            {
                'name': 'Danuja Santhusa Palihawadana Arachchi',
                'category': 'Winner - Had Enough',
                'image': f'{WINNERS_IMAGE_BASE}/2024/junior/junior-2024-1.png',
                'competitionCategory': 'Junior',
            },
            {
                'name': 'Sesadi Wickramasinghe',
                'category': '1st runners-Up - A Deadly Delicacy',
                'image': f'{WINNERS_IMAGE_BASE}/2024/junior/junior-2024-2.png',
                'competitionCategory': 'Junior',
            },
            {
                'name': 'Sesadi Wickramasinghe',
                'category': '2nd runners-Up - Avian Elegance',
                'image': f'{WINNERS_IMAGE_BASE}/2024/junior/junior-2024-3.png',
                'competitionCategory': 'Junior',
            },
        ],
    }
}

FALLBACK_WPOTY_CONFIG = {
    'isAnnounced': False,
    'currentYear': None,
    'googleSheetLink': '',
    'announcementDate': '',
    'submissionDeadline': '',
    'resultsDate': '',
}

FALLBACKS: Dict[str, Any] = {
    EVENTS_DOCUMENT: FALLBACK_EVENTS,
    PROJECTS_DOCUMENT: FALLBACK_PROJECTS,
    NEWS_DOCUMENT: FALLBACK_NEWS,
    TEAM_DOCUMENT: FALLBACK_TEAM,
    WINNERS_DOCUMENT: FALLBACK_WINNERS,
    WPOTY_CONFIG_DOCUMENT: FALLBACK_WPOTY_CONFIG,
}


def get_fallback(document: str) -> Any:
    """
    Return a fresh copy of a document's fallback payload.

    Args:
        document: Document name, e.g. "news.json"

    Returns:
        Deep copy of the fallback payload

    Raises:
        KeyError: If the document has no fallback
    """
    return copy.deepcopy(FALLBACKS[document])
