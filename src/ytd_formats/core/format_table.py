"""Literal metadata for legacy itags.

The platform's player response historically omitted mime type, quality
and bitrate for these identifiers.  Values are kept exactly as observed,
spelling included.  Modern adaptive itags carry their own metadata and
are deliberately absent.

Kept as a sequence of pairs rather than a dict literal so that a
repeated itag is caught by :meth:`FormatRegistry.from_entries` instead
of silently overwriting the earlier entry.
"""

from __future__ import annotations

from ytd_formats.core.models import StaticFormat

FORMAT_TABLE: tuple[tuple[int, StaticFormat], ...] = (
    (
        5,
        StaticFormat(
            mime_type='video/flv; codecs="Sorenson H.283, mp3"',
            quality_label="240p",
            bitrate=250_000,
            audio_bitrate=64,
        ),
    ),
    (
        6,
        StaticFormat(
            mime_type='video/flv; codecs="Sorenson H.263, mp3"',
            quality_label="270p",
            bitrate=800_000,
            audio_bitrate=64,
        ),
    ),
    (
        13,
        StaticFormat(
            mime_type='video/3gp; codecs="MPEG-4 Visual, aac"',
            quality_label=None,
            bitrate=500_000,
            audio_bitrate=None,
        ),
    ),
    (
        17,
        StaticFormat(
            mime_type='video/3gp; codecs="MPEG-4 Visual, aac"',
            quality_label="144p",
            bitrate=50_000,
            audio_bitrate=24,
        ),
    ),
    (
        18,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264, aac"',
            quality_label="360p",
            bitrate=500_000,
            audio_bitrate=96,
        ),
    ),
    (
        22,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264, aac"',
            quality_label="720p",
            bitrate=2_000_000,
            audio_bitrate=192,
        ),
    ),
    (
        34,
        StaticFormat(
            mime_type='video/flv; codecs="H.264, aac"',
            quality_label="360p",
            bitrate=500_000,
            audio_bitrate=128,
        ),
    ),
    (
        35,
        StaticFormat(
            mime_type='video/flv; codecs="H.264, aac"',
            quality_label="480p",
            bitrate=800_000,
            audio_bitrate=128,
        ),
    ),
    (
        36,
        StaticFormat(
            mime_type='video/3gp; codecs="MPEG-4 Visual, aac"',
            quality_label="240p",
            bitrate=175_000,
            audio_bitrate=32,
        ),
    ),
    (
        37,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264, aac"',
            quality_label="1080p",
            bitrate=3_000_000,
            audio_bitrate=192,
        ),
    ),
    (
        38,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264, aac"',
            quality_label="3072p",
            bitrate=3_500_000,
            audio_bitrate=192,
        ),
    ),
    (
        43,
        StaticFormat(
            mime_type='video/webm; codecs="VP8, vorbis"',
            quality_label="360p",
            bitrate=500_000,
            audio_bitrate=128,
        ),
    ),
    (
        44,
        StaticFormat(
            mime_type='video/webm; codecs="VP8, vorbis"',
            quality_label="480p",
            bitrate=1_000_000,
            audio_bitrate=128,
        ),
    ),
    (
        45,
        StaticFormat(
            mime_type='video/webm; codecs="VP8, vorbis"',
            quality_label="720p",
            bitrate=2_000_000,
            audio_bitrate=192,
        ),
    ),
    (
        46,
        StaticFormat(
            mime_type='audio/webm; codecs="vp8, vorbis"',
            quality_label="1080p",
            bitrate=None,
            audio_bitrate=192,
        ),
    ),
    (
        82,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264, aac"',
            quality_label="360p",
            bitrate=500_000,
            audio_bitrate=96,
        ),
    ),
    (
        83,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264, aac"',
            quality_label="240p",
            bitrate=500_000,
            audio_bitrate=96,
        ),
    ),
    (
        84,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264, aac"',
            quality_label="720p",
            bitrate=2_000_000,
            audio_bitrate=192,
        ),
    ),
    (
        85,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264, aac"',
            quality_label="1080p",
            bitrate=3_000_000,
            audio_bitrate=192,
        ),
    ),
    (
        91,
        StaticFormat(
            mime_type='video/ts; codecs="H.264, aac"',
            quality_label="144p",
            bitrate=100_000,
            audio_bitrate=48,
        ),
    ),
    (
        92,
        StaticFormat(
            mime_type='video/ts; codecs="H.264, aac"',
            quality_label="240p",
            bitrate=150_000,
            audio_bitrate=48,
        ),
    ),
    (
        93,
        StaticFormat(
            mime_type='video/ts; codecs="H.264, aac"',
            quality_label="360p",
            bitrate=500_000,
            audio_bitrate=128,
        ),
    ),
    (
        94,
        StaticFormat(
            mime_type='video/ts; codecs="H.264, aac"',
            quality_label="480p",
            bitrate=800_000,
            audio_bitrate=128,
        ),
    ),
    (
        95,
        StaticFormat(
            mime_type='video/ts; codecs="H.264, aac"',
            quality_label="720p",
            bitrate=1_500_000,
            audio_bitrate=256,
        ),
    ),
    (
        96,
        StaticFormat(
            mime_type='video/ts; codecs="H.264, aac"',
            quality_label="1080p",
            bitrate=2_500_000,
            audio_bitrate=256,
        ),
    ),
    (
        100,
        StaticFormat(
            mime_type='audio/webm; codecs="VP8, vorbis"',
            quality_label="360p",
            bitrate=None,
            audio_bitrate=128,
        ),
    ),
    (
        101,
        StaticFormat(
            mime_type='audio/webm; codecs="VP8, vorbis"',
            quality_label="360p",
            bitrate=None,
            audio_bitrate=192,
        ),
    ),
    (
        102,
        StaticFormat(
            mime_type='audio/webm; codecs="VP8, vorbis"',
            quality_label="720p",
            bitrate=None,
            audio_bitrate=192,
        ),
    ),
    (
        120,
        StaticFormat(
            mime_type='video/flv; codecs="H.264, aac"',
            quality_label="720p",
            bitrate=2_000_000,
            audio_bitrate=128,
        ),
    ),
    (
        127,
        StaticFormat(
            mime_type='audio/ts; codecs="aac"',
            quality_label=None,
            bitrate=None,
            audio_bitrate=96,
        ),
    ),
    (
        128,
        StaticFormat(
            mime_type='audio/ts; codecs="aac"',
            quality_label=None,
            bitrate=None,
            audio_bitrate=96,
        ),
    ),
    (
        132,
        StaticFormat(
            mime_type='video/ts; codecs="H.264, aac"',
            quality_label="240p",
            bitrate=150_000,
            audio_bitrate=48,
        ),
    ),
    (
        133,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264"',
            quality_label="240p",
            bitrate=200_000,
            audio_bitrate=None,
        ),
    ),
    (
        134,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264"',
            quality_label="360p",
            bitrate=300_000,
            audio_bitrate=None,
        ),
    ),
    (
        135,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264"',
            quality_label="480p",
            bitrate=500_000,
            audio_bitrate=None,
        ),
    ),
    (
        136,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264"',
            quality_label="720p",
            bitrate=1_000_000,
            audio_bitrate=None,
        ),
    ),
    (
        137,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264"',
            quality_label="1080p",
            bitrate=2_500_000,
            audio_bitrate=None,
        ),
    ),
    (
        138,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264"',
            quality_label="4320p",
            bitrate=13_500_000,
            audio_bitrate=None,
        ),
    ),
    (
        139,
        StaticFormat(
            mime_type='audio/mp4; codecs="aac"',
            quality_label=None,
            bitrate=None,
            audio_bitrate=48,
        ),
    ),
    (
        140,
        StaticFormat(
            mime_type='audio/m4a; codecs="aac"',
            quality_label=None,
            bitrate=None,
            audio_bitrate=128,
        ),
    ),
    (
        141,
        StaticFormat(
            mime_type='audio/mp4; codecs="aac"',
            quality_label=None,
            bitrate=None,
            audio_bitrate=256,
        ),
    ),
    (
        151,
        StaticFormat(
            mime_type='video/ts; codecs="H.264, aac"',
            quality_label="720p",
            bitrate=50_000,
            audio_bitrate=24,
        ),
    ),
    (
        160,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264"',
            quality_label="144p",
            bitrate=100_000,
            audio_bitrate=None,
        ),
    ),
    (
        171,
        StaticFormat(
            mime_type='audio/webm; codecs="vorbis"',
            quality_label=None,
            bitrate=None,
            audio_bitrate=128,
        ),
    ),
    (
        172,
        StaticFormat(
            mime_type='audio/webm; codecs="vorbis"',
            quality_label=None,
            bitrate=None,
            audio_bitrate=192,
        ),
    ),
    (
        242,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="240p",
            bitrate=100_000,
            audio_bitrate=None,
        ),
    ),
    (
        243,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="360p",
            bitrate=250_000,
            audio_bitrate=None,
        ),
    ),
    (
        244,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="480p",
            bitrate=500_000,
            audio_bitrate=None,
        ),
    ),
    (
        247,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="720p",
            bitrate=700_000,
            audio_bitrate=None,
        ),
    ),
    (
        248,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="1080p",
            bitrate=1_500_000,
            audio_bitrate=None,
        ),
    ),
    (
        249,
        StaticFormat(
            mime_type='audio/webm; codecs="opus"',
            quality_label=None,
            bitrate=None,
            audio_bitrate=48,
        ),
    ),
    (
        250,
        StaticFormat(
            mime_type='audio/webm; codecs="opus"',
            quality_label=None,
            bitrate=None,
            audio_bitrate=64,
        ),
    ),
    (
        251,
        StaticFormat(
            mime_type='audio/webm; codecs="opus"',
            quality_label=None,
            bitrate=None,
            audio_bitrate=160,
        ),
    ),
    (
        264,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264"',
            quality_label="1440p",
            bitrate=4_000_000,
            audio_bitrate=None,
        ),
    ),
    (
        266,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264"',
            quality_label="2160p",
            bitrate=12_500_000,
            audio_bitrate=None,
        ),
    ),
    (
        271,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="1440p",
            bitrate=9_000_000,
            audio_bitrate=None,
        ),
    ),
    (
        272,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="4320p",
            bitrate=20_000_000,
            audio_bitrate=None,
        ),
    ),
    (
        278,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="144p 30fps",
            bitrate=80_000,
            audio_bitrate=None,
        ),
    ),
    (
        298,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264"',
            quality_label="720p",
            bitrate=3_000_000,
            audio_bitrate=None,
        ),
    ),
    (
        299,
        StaticFormat(
            mime_type='video/mp4; codecs="H.264"',
            quality_label="1080p",
            bitrate=5_500_000,
            audio_bitrate=None,
        ),
    ),
    (
        300,
        StaticFormat(
            mime_type='video/ts; codecs="H.264, aac"',
            quality_label="720p",
            bitrate=1_318_000,
            audio_bitrate=48,
        ),
    ),
    (
        302,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="720p HFR",
            bitrate=2_500_000,
            audio_bitrate=None,
        ),
    ),
    (
        303,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="1080p HFR",
            bitrate=5_000_000,
            audio_bitrate=None,
        ),
    ),
    (
        308,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="1440p HFR",
            bitrate=10_000_000,
            audio_bitrate=None,
        ),
    ),
    (
        313,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="2160p",
            bitrate=13_000_000,
            audio_bitrate=None,
        ),
    ),
    (
        315,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="2160p HFR",
            bitrate=20_000_000,
            audio_bitrate=None,
        ),
    ),
    (
        330,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="144p HDR, HFR",
            bitrate=80_000,
            audio_bitrate=None,
        ),
    ),
    (
        331,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="240p HDR, HFR",
            bitrate=100_000,
            audio_bitrate=None,
        ),
    ),
    (
        332,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="360p HDR, HFR",
            bitrate=250_000,
            audio_bitrate=None,
        ),
    ),
    (
        333,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="240p HDR, HFR",
            bitrate=500_000,
            audio_bitrate=None,
        ),
    ),
    (
        334,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="720p HDR, HFR",
            bitrate=1_000_000,
            audio_bitrate=None,
        ),
    ),
    (
        335,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="1080p HDR, HFR",
            bitrate=1_500_000,
            audio_bitrate=None,
        ),
    ),
    (
        336,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="1440p HDR, HFR",
            bitrate=5_000_000,
            audio_bitrate=None,
        ),
    ),
    (
        337,
        StaticFormat(
            mime_type='video/webm; codecs="VP9"',
            quality_label="2160p HDR, HFR",
            bitrate=12_000_000,
            audio_bitrate=None,
        ),
    ),
)
