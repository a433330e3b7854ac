"""Lookup tables for MPEG audio frame headers.

Bit rates are in kbit/s and indexed by the 4-bit bit rate index; index 0
(free format) is stored as 0 and index 15 is absent. Callers must reject
both before indexing.
"""

from ..models.frame import MPEGLayer, MPEGVersion

BIT_RATES: dict[tuple[bool, MPEGLayer], tuple[int, ...]] = {
    # (is MPEG-1, layer)
    (True, MPEGLayer.LAYER_I): (0, 32, 64, 96, 128, 160, 192, 224, 256, 288, 320, 352, 384, 416, 448),
    (True, MPEGLayer.LAYER_II): (0, 32, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320, 384),
    (True, MPEGLayer.LAYER_III): (0, 32, 40, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320),
    (False, MPEGLayer.LAYER_I): (0, 32, 48, 56, 64, 80, 96, 112, 128, 144, 160, 176, 192, 224, 256),
    (False, MPEGLayer.LAYER_II): (0, 8, 16, 24, 32, 40, 48, 56, 64, 80, 96, 112, 128, 144, 160),
    (False, MPEGLayer.LAYER_III): (0, 8, 16, 24, 32, 40, 48, 56, 64, 80, 96, 112, 128, 144, 160),
}

SAMPLING_RATES: dict[MPEGVersion, tuple[int, int, int]] = {
    MPEGVersion.MPEG_1: (44100, 48000, 32000),
    MPEGVersion.MPEG_2: (22050, 24000, 16000),
    MPEGVersion.MPEG_2_5: (11025, 12000, 8000),
}

SAMPLE_COUNTS: dict[tuple[bool, MPEGLayer], int] = {
    (True, MPEGLayer.LAYER_I): 384,
    (True, MPEGLayer.LAYER_II): 1152,
    (True, MPEGLayer.LAYER_III): 1152,
    (False, MPEGLayer.LAYER_I): 384,
    (False, MPEGLayer.LAYER_II): 1152,
    (False, MPEGLayer.LAYER_III): 576,
}

# Padding slot size in bytes.
SLOT_SIZES: dict[MPEGLayer, int] = {
    MPEGLayer.LAYER_I: 4,
    MPEGLayer.LAYER_II: 1,
    MPEGLayer.LAYER_III: 1,
}
