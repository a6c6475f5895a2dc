"""Block 13 conference schedule (Georgetown, October 15-17 2025) and session chat bootstrap."""

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .models import ConferenceSession, ConferenceTrack
from ..transcripts import SaveResult, TranscriptStore
from ...logging_config import get_logger

logger = get_logger(__name__)

CONFERENCE_PROJECT_ID = "bgin-conference-2025"
METADATA_VERSION = "1.0.0"

_TRACKS = [
    ConferenceTrack(
        id="bgin-agent-hack", name="BGIN Agent Hack",
        description="Multi-agent system development and AI governance research",
        color="#8B5CF6", icon="🤖", working_group="BGIN Agent Hack",
    ),
    ConferenceTrack(
        id="ikp", name="Identity, Key Management & Privacy",
        description="Cryptographic identity, key management, and privacy-preserving technologies",
        color="#10B981", icon="🔐", working_group="IKP",
    ),
    ConferenceTrack(
        id="cyber-security", name="Cyber Security",
        description="Blockchain security, threat analysis, and protection mechanisms",
        color="#EF4444", icon="🛡️", working_group="Cyber Security",
    ),
    ConferenceTrack(
        id="fase", name="FASE (Financial and Social Economies)",
        description="Policy and financial applications of blockchain technology",
        color="#F59E0B", icon="💰", working_group="FASE",
    ),
    ConferenceTrack(
        id="general", name="General",
        description="General discussions, networking, and cross-cutting topics",
        color="#6B7280", icon="🌐", working_group="General",
    ),
]

CONFERENCE_TRACKS: Dict[str, ConferenceTrack] = {track.id: track for track in _TRACKS}

_DAY1, _DAY2, _DAY3 = "October 15, 2025", "October 16, 2025", "October 17, 2025"


def _session(session_id: str, title: str, date: str, slot: str, room: str, description: str,
             agents: List[str], session_type: str, track: str, focus: str) -> ConferenceSession:
    return ConferenceSession(
        id=session_id, title=title, date=date, time=slot, room=room, description=description,
        agents=agents, session_type=session_type, project_id=CONFERENCE_PROJECT_ID,
        track=track, working_group=CONFERENCE_TRACKS[track].working_group, focus=focus,
    )


_SESSIONS = [
    _session("day1-9am-1030am", "BGIN Agent Hack", _DAY1, "9:00 - 10:30", "Leavey Program Room",
             "Multi-agent system development and testing for blockchain governance research",
             ["archive", "codex", "discourse"], "hackathon", "bgin-agent-hack",
             "AI Development, Multi-Agent Systems, Governance Research"),
    _session("day1-11am-1230pm", "Offline Key Management", _DAY1, "11:00 - 12:30", "Arrupe Hall",
             "Security and management of cryptographic keys in offline environments",
             ["codex", "archive"], "technical-standards", "ikp",
             "Key Management, Cryptographic Security, Offline Operations"),
    _session("day1-130pm-3pm", "Governance of Security Supply Chain", _DAY1, "13:30 - 15:00", "Arrupe Hall",
             "Managing security across blockchain supply chains and governance frameworks",
             ["codex", "discourse", "archive"], "regulatory", "cyber-security",
             "Supply Chain Security, Governance Frameworks, Risk Management"),
    _session("day1-330pm-5pm", "Information Sharing Framework Standard", _DAY1, "15:30 - 17:00", "Arrupe Hall",
             "Developing standards for secure information sharing in blockchain ecosystems",
             ["archive", "codex"], "technical-standards", "fase",
             "Financial Standards, Information Sharing, Economic Framework Design"),
    _session("day1-510pm", "ZKP and Privacy Enhanced Authentication", _DAY1, "17:10 - 18:30", "Arrupe Hall",
             "Zero-knowledge proofs and privacy-preserving authentication mechanisms",
             ["codex", "archive"], "privacy-rights", "ikp",
             "Zero-Knowledge Proofs, Privacy, Authentication, Cryptographic Protocols"),
    _session("day1-510pm-reception", "Welcome Reception", _DAY1, "17:10 - 19:00",
             "Georgetown University Faculty Club Restaurant",
             "Networking and informal discussions",
             ["discourse"], "cross-chain-governance", "general",
             "Networking, Community Building, Informal Discussions"),
    _session("day2-9am-1030am", "BGIN Agent Hack", _DAY2, "9:00 - 10:30", "Leavey Program Room",
             "Continued development of multi-agent systems",
             ["archive", "codex", "discourse"], "hackathon", "bgin-agent-hack",
             "AI Development, Multi-Agent Systems, Governance Research"),
    _session("day2-11am-1230pm", "Security Target and Protection Profile", _DAY2, "11:00 - 12:30", "Arrupe Hall",
             "Defining security targets and protection profiles for blockchain systems",
             ["codex", "archive"], "technical-standards", "cyber-security",
             "Security Targets, Protection Profiles, Risk Assessment"),
    _session("day2-130pm-3pm", "Crypto Agility and PQC Migration", _DAY2, "13:30 - 15:00", "Arrupe Hall",
             "Post-quantum cryptography migration and cryptographic agility",
             ["codex", "archive"], "technical-standards", "ikp",
             "Post-Quantum Cryptography, Migration Strategies, Cryptographic Agility"),
    _session("day2-330pm-5pm", "TBD Session", _DAY2, "15:30 - 17:00", "Arrupe Hall",
             "To be determined session",
             ["archive", "codex", "discourse"], "regulatory", "general",
             "TBD - Flexible Session"),
    _session("day2-5pm-6pm", "Security Gathering on the Hill", _DAY2, "17:00 - 18:00", "Arrupe Hall",
             "Policy and regulatory discussions",
             ["discourse", "codex"], "regulatory", "cyber-security",
             "Policy Development, Regulatory Discussions, Security Governance"),
    _session("day3-9am-1030am-hariri140", "Accountable Wallet", _DAY3, "9:00 - 10:30", "Hariri 140",
             "Accountability mechanisms for digital wallets",
             ["codex", "archive"], "technical-standards", "ikp",
             "Wallet Security, Accountability, Digital Identity, Key Management"),
    _session("day3-9am-1030am-hariri240", "Establishing Technical Metrics to Evaluate Decentralization", _DAY3,
             "9:00 - 10:30", "Hariri 240",
             "Quantifying decentralization in blockchain networks",
             ["archive", "codex"], "technical-standards", "fase",
             "Financial Decentralization Metrics, Economic Evaluation Methods, Policy Standards"),
    _session("day3-1045am-1215pm-hariri140", "Forensics & Analysis", _DAY3, "10:45 - 12:15", "Hariri 140",
             "Blockchain forensics and transaction analysis",
             ["archive", "codex"], "technical-standards", "fase",
             "Financial Forensics, Economic Transaction Analysis, Policy Investigation Tools"),
    _session("day3-1045am-1215pm-hariri240", "Toward a Common Lexicon for Harmful On-Chain Activities", _DAY3,
             "10:45 - 12:15", "Hariri 240",
             "Standardizing terminology for blockchain security threats",
             ["codex", "discourse", "archive"], "regulatory", "cyber-security",
             "Threat Classification, Terminology Standards, Security Lexicon"),
    _session("day3-115pm-230pm-hariri140", "BGIN Agent Hack Final Presentation", _DAY3, "13:15 - 14:30",
             "Hariri 140",
             "Final presentations of multi-agent system developments",
             ["archive", "codex", "discourse"], "hackathon", "bgin-agent-hack",
             "AI Development, Multi-Agent Systems, Governance Research, Presentations"),
    _session("day3-115pm-230pm-hariri240", "Practical Stablecoin Implementation Guide", _DAY3, "13:15 - 14:30",
             "Hariri 240",
             "Implementation guidelines for stablecoin systems",
             ["codex", "archive"], "technical-standards", "fase",
             "Stablecoin Policy Standards, Financial Implementation Guidelines, Economic Specifications"),
    _session("day3-245pm-415pm-hariri140", "AI Agent Governance - Archive", _DAY3, "14:45 - 16:15", "Hariri 140",
             "Governance frameworks for AI agents in blockchain systems",
             ["archive", "codex", "discourse"], "regulatory", "bgin-agent-hack",
             "AI Governance, Multi-Agent Systems, Regulatory Frameworks"),
    _session("day3-245pm-415pm-hariri240", "Harmonization among Crypto-asset, Stablecoin and Tokenized Deposit",
             _DAY3, "14:45 - 16:15", "Hariri 240",
             "Regulatory harmonization across different digital asset types",
             ["codex", "discourse", "archive"], "regulatory", "fase",
             "Financial Regulatory Harmonization, Digital Asset Policy, Economic Standards Alignment"),
]

CONFERENCE_SESSIONS: Dict[str, ConferenceSession] = {session.id: session for session in _SESSIONS}


def list_tracks() -> List[ConferenceTrack]:
    return list(CONFERENCE_TRACKS.values())


def list_sessions(track_id: Optional[str] = None) -> List[ConferenceSession]:
    """All sessions in schedule order, optionally limited to one track."""
    sessions = list(CONFERENCE_SESSIONS.values())
    if track_id is None:
        return sessions
    return [session for session in sessions if session.track == track_id]


def get_session(session_id: str) -> Optional[ConferenceSession]:
    return CONFERENCE_SESSIONS.get(session_id)


def build_welcome_message(session: ConferenceSession) -> Dict[str, Any]:
    """System message that opens a session's chat transcript."""

    content = (
        f"Welcome to {session.title}!\n\n"
        f"**Session Details:**\n"
        f"- Date: {session.date}\n"
        f"- Time: {session.time}\n"
        f"- Room: {session.room}\n"
        f"- Description: {session.description}\n\n"
        f"**Available Agents:** {', '.join(session.agents)}\n\n"
        f"This chat session is ready for {session.session_type} discussions. You can ask questions, "
        f"share insights, or collaborate with the AI agents on topics related to this session."
    )
    return {
        "id": time.time_ns() // 1_000_000,
        "role": "system",
        "type": "system",
        "content": content,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "projectId": session.project_id,
        "sessionId": session.id,
        "isSystemMessage": True,
    }


@dataclass
class SessionInitResult:
    session: ConferenceSession
    messages: List[Dict[str, Any]]
    metadata: Dict[str, Any]
    saved: SaveResult


def initialize_session(session: ConferenceSession, store: TranscriptStore) -> SessionInitResult:
    """Save a fresh transcript for the session holding only the welcome message."""

    messages = [build_welcome_message(session)]
    metadata = {
        "sessionTitle": session.title,
        "sessionDate": session.date,
        "sessionTime": session.time,
        "sessionRoom": session.room,
        "sessionDescription": session.description,
        "availableAgents": list(session.agents),
        "sessionType": session.session_type,
        "initializedAt": datetime.now(timezone.utc).isoformat(),
        "version": METADATA_VERSION,
    }
    saved = store.save(session.project_id, session.id, messages, metadata)
    logger.info(f"🎤 Initialized conference session {session.id} ({saved.filename})")
    return SessionInitResult(session=session, messages=messages, metadata=metadata, saved=saved)
