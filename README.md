# chatexport

Building blocks for turning a chat message database into readable archives:
option handling, file naming, attachment copying and the HTML pieces of a
transcript.

## Modules

- `chatexport.options` – command-line parsing and validation.
  `build_parser()` returns an `argparse.ArgumentParser`; `Options.from_args`
  turns its result into an `Options` dataclass (`db_path`, `no_copy`,
  `diagnostic`, `export_type`, `export_path`, `start_date`, `end_date`,
  `no_lazy`). `parse_date` reads `YYYY-MM-DD` and raises `ValueError` on
  anything else. `validate_path` resolves the export directory.
- `chatexport.errors` – `ExportError` and its subclasses
  `InvalidOptionsError`, `DiskError` and `DatabaseError`.
- `chatexport.naming` – `ChatRoom` and `ExportContext`. The context looks up
  senders (`who`, giving `"Me"` or `"Unknown"` where appropriate),
  deduplicated conversations (`conversation`), attachment folders
  (`attachment_path`, `conversation_attachment_path`, falling back to
  `orphaned`), per-chat file names (`filename`, `filename_from_participants`,
  capped at 240 characters with an ", and N others" suffix) and counts of
  duplicated contacts and chats (`duplicate_counts`).
- `chatexport.sanitizers` – `sanitize_filename` replaces `/`, `\` and `:`
  with `_`.
- `chatexport.converter` – `Converter.determine()` picks `sips` or
  ImageMagick's `convert` if either is on the `PATH`; `heic_to_jpeg` runs it;
  `program_exists` checks for a program.
- `chatexport.balloons` – frozen dataclasses for rich bubbles (`URLMessage`,
  `MusicMessage`, `CollaborationMessage`, `AppMessage`) and the abstract
  `BalloonFormatter`.
- `chatexport.html_balloons` – `HtmlBalloonFormatter`, which renders those
  bubbles as HTML fragments; `no_lazy=True` leaves `loading="lazy"` off
  preview images.
- `chatexport.html_attachments` – `MediaKind`, `AttachmentError`,
  `resolve_attachment_path` (expands a leading `~`), `copy_attachment`,
  `embed_path` and `media_tag`, which builds the `<img>`, `<video>`,
  `<audio>` or link element for an attachment.
- `chatexport.html_document` – pieces of an HTML transcript: `add_line`,
  `format_time`, `format_reaction`, `format_sticker`, `format_announcement`,
  `format_deleted`, `edited_to_html`, `expressive_text`, `format_shareplay`,
  and file helpers `write_to_file`, `write_headers` and `write_footer`.
- `chatexport.progress` – `build_progress_bar_export`, a `tqdm` bar starting
  at zero.

## Example

```python
from chatexport.naming import ChatRoom, ExportContext
from chatexport.sanitizers import sanitize_filename

sanitize_filename("a/b\\c:d")  # "a_b_c_d"

context = ExportContext(participants={10: "Person 10", 11: "Person 11"})
context.chatroom_participants[0] = {10, 11}
context.filename(ChatRoom(rowid=0, chat_identifier="Default"))
# "Person 10, Person 11"
```

## Options

The parser built by `build_parser` accepts:

| Option | Meaning |
| --- | --- |
| `-d`, `--diagnostics` | Print diagnostic information and exit |
| `-f`, `--format` | Export format: `txt` or `html` |
| `-n`, `--no-copy` | Reference attachments in place instead of copying them |
| `-p`, `--db-path` | Path to the message database (default `~/Library/Messages/chat.db`) |
| `-o`, `--export-path` | Directory for exported data (default `~/imessage_export`) |
| `-s`, `--start-date` | Only include messages sent on or after `YYYY-MM-DD` |
| `-e`, `--end-date` | Only include messages sent before `YYYY-MM-DD` |
| `-l`, `--no-lazy` | Leave out `loading="lazy"` on HTML images |

`Options.from_args` raises `InvalidOptionsError` when `--no-copy` or
`--export-path` is given without `--format`, when `--no-lazy` is given without
`--format html`, when diagnostics are combined with export options, when a
date is malformed, or when the export directory already holds files with the
chosen format's extension.

## Attachments

`copy_attachment` places a file in the given directory under a random name.
HEIC images are converted to JPEG when a converter is passed; other files are
copied as they are, and a missing source raises `AttachmentError`. The copy
keeps the source's access time and takes the given modification time, or the
source's when none is given. `embed_path` gives the `attachments/<chat>/<name>`
path used inside the HTML.

## What this package does not do

There is no command that runs an export, and nothing here reads the message
database: the package provides the options parser, naming, attachment and
HTML-fragment helpers, but no code that walks the messages, writes complete
transcripts (HTML or plain text) or runs the diagnostics that `--diagnostics`
describes.