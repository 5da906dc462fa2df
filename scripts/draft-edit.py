import os

from scripts.subdraft_common import (
    InitLogger,
    CreateArgParser,
    CreateOptions,
    RunAndExit,
)

from PySubDraft.DraftProject import DraftProject

parser = CreateArgParser("Inserts gaps between subtitles or replaces text in an existing draft. Non-JSON files get plain text substitutions.")
args = parser.parse_args()

InitLogger("draft-edit", args.debug)

def edit(args) -> str:
    project = DraftProject(CreateOptions(args))

    _, extension = os.path.splitext(args.input)
    if extension.lower() == '.json':
        return project.EditDraftFile(args.input, args.output)

    return project.ReplaceInTextFile(args.input, args.output)

RunAndExit(edit, args)
