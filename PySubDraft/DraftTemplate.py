"""
Fixed structure of a draft document.

The editing application only accepts drafts that match its schema exactly, so the skeleton,
the text material preset and the segment preset are kept as plain data. Fields set to None
are filled in by DraftProjector: identifiers, text content and per-cue timing.
"""
from copy import deepcopy
from typing import Any

from PySubDraft.Helpers import GenerateId

ANIMATION_POOL_SIZE = 2
DEFAULT_RENDER_INDEX_BASE = 14000

_platform : dict[str, Any] = {
    "app_id": 359289,
    "app_source": "cc",
    "app_version": "1.5.0",
    "device_id": "839a3a0281bf298bb7a04ef106f6f838",
    "hard_disk_id": "2042ebf3be3c78787b62a7cf8ea27d5d",
    "mac_address": "72859f122da5bc1c1d727bfd8490ee4f",
    "os": "windows",
    "os_version": "10.0.19044"
}

_animation_group : dict[str, Any] = {
    "animations": [],
    "id": None,
    "type": "sticker_animation"
}

DRAFT_TEMPLATE : dict[str, Any] = {
    "canvas_config": {
        "height": 1080,
        "ratio": "original",
        "width": 1920
    },
    "color_space": 0,
    "config": {
        "adjust_max_index": 1,
        "attachment_info": [],
        "combination_max_index": 1,
        "export_range": None,
        "extract_audio_last_index": 1,
        "lyrics_recognition_id": "",
        "lyrics_sync": True,
        "lyrics_taskinfo": [],
        "maintrack_adsorb": True,
        "material_save_mode": 0,
        "original_sound_last_index": 1,
        "record_audio_last_index": 1,
        "sticker_max_index": 1,
        "subtitle_recognition_id": "",
        "subtitle_sync": True,
        "subtitle_taskinfo": [
            {
                "id": None,
                "language": "",
                "remove_invalid_task_id": "",
                "type": 10
            }
        ],
        "video_mute": False,
        "zoom_info_params": None
    },
    "cover": None,
    "create_time": 0,
    "duration": 32600000,
    "extra_info": None,
    "fps": 30.0,
    "free_render_index_mode_on": False,
    "group_container": None,
    "id": None,
    "keyframes": {
        "adjusts": [],
        "audios": [],
        "filters": [],
        "handwrites": [],
        "stickers": [],
        "texts": [],
        "videos": []
    },
    "last_modified_platform": deepcopy(_platform),
    "materials": {
        "audio_balances": [],
        "audio_effects": [],
        "audio_fades": [],
        "audios": [],
        "beats": [],
        "canvases": [],
        "chromas": [],
        "color_curves": [],
        "drafts": [],
        "effects": [],
        "handwrites": [],
        "hsl": [],
        "images": [],
        "log_color_wheels": [],
        "manual_deformations": [],
        "masks": [],
        "material_animations": [deepcopy(_animation_group) for _ in range(ANIMATION_POOL_SIZE)],
        "placeholders": [],
        "plugin_effects": [],
        "primary_color_wheels": [],
        "realtime_denoises": [],
        "speeds": [],
        "stickers": [],
        "tail_leaders": [],
        "text_templates": [],
        "texts": [],
        "transitions": [],
        "video_effects": [],
        "video_trackings": [],
        "videos": []
    },
    "mutable_config": None,
    "name": "",
    "new_version": "68.0.1",
    "platform": deepcopy(_platform),
    "relationships": [],
    "render_index_track_mode_on": False,
    "retouch_cover": None,
    "source": "default",
    "static_cover_image_path": "",
    "tracks": [
        {
            "attribute": 0,
            "flag": 0,
            "id": None,
            "segments": [],
            "type": "video"
        },
        {
            "attribute": 0,
            "flag": 1,
            "id": None,
            "segments": [],
            "type": "text"
        }
    ],
    "update_time": 0,
    "version": 360000
}

TEXT_MATERIAL_PRESET : dict[str, Any] = {
    "add_type": 1,
    "alignment": 1,
    "background_alpha": 1.0,
    "background_color": "",
    "background_height": 1.0,
    "background_horizontal_offset": 0.0,
    "background_round_radius": 0.0,
    "background_style": 0,
    "background_vertical_offset": 0.0,
    "background_width": 1.0,
    "bold_width": 0.0,
    "border_color": "",
    "border_width": 0.08,
    "check_flag": 7,
    "content": None,
    "font_category_id": "",
    "font_category_name": "",
    "font_id": "",
    "font_name": "",
    "font_path": None,
    "font_resource_id": "",
    "font_size": 5.0,
    "font_source_platform": 0,
    "font_team_id": "",
    "font_title": "none",
    "font_url": "",
    "fonts": [],
    "global_alpha": 1.0,
    "group_id": "",
    "has_shadow": False,
    "id": None,
    "initial_scale": 1.0,
    "is_rich_text": False,
    "italic_degree": 0,
    "ktv_color": "",
    "layer_weight": 1,
    "letter_spacing": 0.0,
    "line_spacing": 0.02,
    "name": "",
    "recognize_type": 0,
    "shadow_alpha": 0.8,
    "shadow_angle": -45.0,
    "shadow_color": "",
    "shadow_distance": 8.0,
    "shadow_point": {
        "x": 1.0182337649086284,
        "y": -1.0182337649086284
    },
    "shadow_smoothing": 1.0,
    "shape_clip_x": False,
    "shape_clip_y": False,
    "style_name": "",
    "sub_type": 0,
    "text_alpha": 1.0,
    "text_color": "#FFFFFF",
    "text_preset_resource_id": "",
    "text_size": 30,
    "text_to_audio_ids": [],
    "tts_auto_update": False,
    "type": "subtitle",
    "typesetting": 0,
    "underline": False,
    "underline_offset": 0.22,
    "underline_width": 0.05,
    "use_effect_default_color": True,
    "words": []
}

SEGMENT_PRESET : dict[str, Any] = {
    "cartoon": False,
    "clip": {
        "alpha": 1.0,
        "flip": {
            "horizontal": False,
            "vertical": False
        },
        "rotation": 0.0,
        "scale": {
            "x": 1.0,
            "y": 1.0
        },
        "transform": {
            "x": 0.0,
            "y": -0.73
        }
    },
    "enable_adjust": False,
    "enable_color_curves": True,
    "enable_color_wheels": True,
    "enable_lut": False,
    "extra_material_refs": None,
    "group_id": "",
    "hdr_settings": None,
    "id": None,
    "intensifies_audio": False,
    "is_placeholder": False,
    "is_tone_modify": False,
    "keyframe_refs": [],
    "last_nonzero_volume": 1.0,
    "material_id": None,
    "render_index": None,
    "reverse": False,
    "source_timerange": None,
    "speed": 1.0,
    "target_timerange": None,
    "template_id": "",
    "track_attribute": 0,
    "track_render_index": 0,
    "visible": True,
    "volume": 1.0
}

def NewDraftSkeleton() -> dict[str, Any]:
    """
    Copy the draft template and assign fresh identifiers to the document,
    the default subtitle task, the animation groups and both tracks.
    """
    draft = deepcopy(DRAFT_TEMPLATE)
    draft['config']['subtitle_taskinfo'][0]['id'] = GenerateId()
    draft['id'] = GenerateId()

    for animation_group in draft['materials']['material_animations']:
        animation_group['id'] = GenerateId()

    for track in draft['tracks']:
        track['id'] = GenerateId()

    return draft

def NewTextMaterial(material_id : str, content : str, font_path : str) -> dict[str, Any]:
    material = deepcopy(TEXT_MATERIAL_PRESET)
    material['content'] = content
    material['font_path'] = font_path
    material['id'] = material_id
    return material

def NewSegment(material_id : str, animation_id : str, start : int, duration : int, render_index : int) -> dict[str, Any]:
    segment = deepcopy(SEGMENT_PRESET)
    segment['extra_material_refs'] = [animation_id]
    segment['id'] = GenerateId()
    segment['material_id'] = material_id
    segment['render_index'] = render_index
    segment['target_timerange'] = {
        "duration": duration,
        "start": start
    }
    return segment
