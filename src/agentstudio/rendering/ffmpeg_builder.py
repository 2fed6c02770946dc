"""FFmpeg command construction for still-image narration videos."""

from pathlib import Path

from agentstudio.config import Settings, get_settings


class StillImageCommandBuilder:
    """Builds the ffmpeg invocation that loops one image under an audio track."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def build_input_args(self, image_path: Path, audio_path: Path) -> list[str]:
        """Looped still as input 0, narration as input 1."""
        return ["-loop", "1", "-i", str(image_path), "-i", str(audio_path)]

    def build_output_args(self) -> list[str]:
        s = self.settings
        args = ["-c:v", s.output_video_codec]
        if s.output_video_tune:
            args.extend(["-tune", s.output_video_tune])
        args.extend(
            [
                "-c:a",
                s.output_audio_codec,
                "-b:a",
                s.output_audio_bitrate,
                "-pix_fmt",
                s.output_pixel_format,
                # The looped still is infinite; stop when the narration ends
                "-shortest",
            ]
        )
        return args

    def build_command(self, image_path: Path, audio_path: Path, output_path: Path) -> list[str]:
        """Complete argv, binary first."""
        cmd = [self.settings.ffmpeg_binary, "-y", "-loglevel", "error"]
        cmd.extend(self.build_input_args(image_path, audio_path))
        cmd.extend(self.build_output_args())
        cmd.append(str(output_path))
        return cmd
