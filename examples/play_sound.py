"""Example: loop one of the ambient sounds until Ctrl+C."""

import logging
import sys
import time

from sleepsounds import PlayerConfig, SoundOption, SoundPlayer
from sleepsounds.utils.log import set_level

if __name__ == "__main__":
    args = [arg for arg in sys.argv[1:] if arg != "-v"]
    if "-v" in sys.argv:
        set_level(logging.INFO)

    if len(args) < 1:
        names = ", ".join(option.asset_id for option in SoundOption)
        print(f"Usage: python play_sound.py [-v] <sound> [assets_dir]  (sounds: {names})")
        sys.exit(1)

    try:
        option = SoundOption.from_name(args[0])
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    overrides = {"raise_errors": True}
    if len(args) > 1:
        overrides["assets_dir"] = args[1]
    config = PlayerConfig.from_env(**overrides)

    with SoundPlayer(config) as player:
        try:
            player.play(option)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)

        print(f"Playing {option.display_name}, press Ctrl+C to stop")
        try:
            while player.is_playing:
                time.sleep(0.1)
        except KeyboardInterrupt:
            print("\nStopping...")
            player.stop()
