from scripts.subdraft_common import (
    InitLogger,
    CreateArgParser,
    CreateOptions,
    RunAndExit,
)

from PySubDraft.DraftProject import DraftProject

parser = CreateArgParser("Converts SRT subtitles into a video editor draft (draft_content.json)")
parser.add_argument('--font', type=str, default=None, help="Path of the font referenced by the text materials")
parser.add_argument('--render-index', type=int, default=None, help="Render index of the first subtitle (later subtitles count down)")
args = parser.parse_args()

InitLogger("srt-to-draft", args.debug)

def convert(args) -> str:
    options = CreateOptions(args, font_path=args.font, render_index_base=args.render_index)
    project = DraftProject(options)
    return project.ConvertFile(args.input, args.output)

RunAndExit(convert, args)
