import os
import uuid


def GenerateId() -> str:
    """
    Generate a random identifier for a draft element, e.g. 1b4e28ba-2fa1-4d3b-a3f5-ef19b5a7633b
    """
    return str(uuid.uuid4())

def GetInputPath(filepath : str|None) -> str|None:
    if not filepath:
        return None

    return os.path.normpath(filepath)

def GetOutputPath(filepath : str|None, extension : str) -> str|None:
    """
    Derive an output path next to the source file with a different extension
    """
    if not filepath:
        return None

    basename, _ = os.path.splitext(os.path.basename(filepath))
    directory = os.path.dirname(filepath)
    if not extension.startswith('.'):
        extension = f".{extension}"

    return os.path.join(directory, f"{basename}{extension}")
