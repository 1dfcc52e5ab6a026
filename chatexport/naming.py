"""Chat and participant lookups used to name export files and attachment folders."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from chatexport.sanitizers import sanitize_filename

MAX_LENGTH = 240
ME = "Me"
UNKNOWN = "Unknown"
ORPHANED = "orphaned"
ATTACHMENTS_DIR = "attachments"


@dataclass
class ChatRoom:
    """A conversation from the chat table."""

    rowid: int
    chat_identifier: str
    service_name: str = ""
    display_name: str | None = None


@dataclass
class ExportContext:
    """Cached chat and contact data that exporters consult while writing."""

    chatrooms: dict[int, ChatRoom] = field(default_factory=dict)
    real_chatrooms: dict[int, int] = field(default_factory=dict)
    chatroom_participants: dict[int, set[int]] = field(default_factory=dict)
    participants: dict[int, str] = field(default_factory=dict)
    real_participants: dict[int, int] = field(default_factory=dict)
    export_path: Path = field(default_factory=Path)

    def conversation(self, chat_id: int | None) -> tuple[ChatRoom, int] | None:
        """Return the chat and its deduplicated ID, or None when unknown."""
        if chat_id is None:
            return None
        chatroom = self.chatrooms.get(chat_id)
        if chatroom is None:
            print(f"Chat ID {chat_id} does not exist in chat table!", file=sys.stderr)
            return None
        real_id = self.real_chatrooms.get(chat_id)
        if real_id is None:
            return None
        return chatroom, real_id

    def attachment_path(self) -> Path:
        """The directory that copied attachments are written to."""
        return Path(self.export_path) / ATTACHMENTS_DIR

    def conversation_attachment_path(self, chat_id: int | None) -> str:
        """The attachment sub-directory name for a chat."""
        if chat_id is not None and chat_id in self.real_chatrooms:
            return str(self.real_chatrooms[chat_id])
        return ORPHANED

    def filename(self, chatroom: ChatRoom) -> str:
        """A safe file name for a chat, from its name, its members or its identifier."""
        name = chatroom.display_name
        if name:
            result = f"{name[:MAX_LENGTH]} - {chatroom.rowid}"
        else:
            members = self.chatroom_participants.get(chatroom.rowid)
            if members is not None:
                result = self.filename_from_participants(members)
            else:
                print(
                    f"Found error: message chat ID {chatroom.rowid} has no members!",
                    file=sys.stderr,
                )
                result = chatroom.chat_identifier
        return sanitize_filename(result)

    def filename_from_participants(self, participants: set[int]) -> str:
        """Join participant names, truncating with a count of those left out."""
        added = 0
        out = ""
        for participant_id in sorted(participants):
            participant = self.who(participant_id, False)
            if len(participant) + len(out) < MAX_LENGTH:
                if out:
                    out += ", "
                out += participant
                added += 1
                continue
            extra = f", and {len(participants) - added} others"
            if len(extra) + len(out) >= MAX_LENGTH:
                out = out[: MAX_LENGTH - len(extra)] + extra
            elif not out:
                out = participant[:MAX_LENGTH]
            else:
                out += extra
            break
        return out

    def who(self, handle_id: int, is_from_me: bool) -> str:
        """The display name of a message's sender."""
        if is_from_me:
            return ME
        return self.participants.get(handle_id, UNKNOWN)

    def duplicate_counts(self) -> tuple[int, int]:
        """How many contacts and chats collapse into others after deduplication."""
        duplicated_contacts = len(self.participants) - len(set(self.real_participants.values()))
        duplicated_chats = len(self.chatrooms) - len(set(self.real_chatrooms.values()))
        return duplicated_contacts, duplicated_chats