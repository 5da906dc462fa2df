from scripts.subdraft_common import (
    InitLogger,
    CreateArgParser,
    CreateOptions,
    RunAndExit,
)

from PySubDraft.DraftProject import DraftProject

parser = CreateArgParser("Extracts the subtitles from a video editor draft as SRT")
args = parser.parse_args()

InitLogger("draft-to-srt", args.debug)

def export(args) -> str:
    project = DraftProject(CreateOptions(args))
    return project.ExportSubtitles(args.input, args.output)

RunAndExit(export, args)
