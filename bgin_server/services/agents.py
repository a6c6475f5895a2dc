"""Static descriptions of the three BGIN agents and the Block 13 session list."""

from typing import Any, Dict, List

AGENTS: List[Dict[str, Any]] = [
    {
        "id": "archive",
        "name": "Archive Agent",
        "description": "Knowledge & RAG Systems",
        "status": "active",
        "capabilities": ["Document Analysis", "Knowledge Synthesis", "Cross-Session Search"],
    },
    {
        "id": "codex",
        "name": "Codex Agent",
        "description": "Policy & Standards Management",
        "status": "active",
        "capabilities": ["Policy Analysis", "Compliance Check", "Standards Development"],
    },
    {
        "id": "discourse",
        "name": "Discourse Agent",
        "description": "Communications & Collaboration",
        "status": "active",
        "capabilities": ["Forum Integration", "Consensus Building", "Community Management"],
    },
]

BLOCK_SESSIONS: List[Dict[str, Any]] = [
    {"id": "keynote", "name": "Opening Keynote", "status": "live", "participants": 150},
    {"id": "technical", "name": "Technical Standards", "status": "active", "participants": 89},
    {"id": "regulatory", "name": "Regulatory Landscape", "status": "active", "participants": 67},
    {"id": "privacy", "name": "Privacy & Digital Rights", "status": "upcoming", "participants": 0},
    {"id": "governance", "name": "Cross-Chain Governance", "status": "planning", "participants": 0},
]
