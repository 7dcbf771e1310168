"""
main.py — Bootstrap

1. Load tuning (optionally with a revision profile)
2. Create the app
3. Push the platformer scene
4. Run

    python main.py                    # canonical game
    python main.py --profile classic  # earliest revision
"""

import argparse
import sys
from core import tuning
from core.app import App, SurfaceUnavailable
from scenes.platformer_scene import PlatformerScene


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Pixel Realm platformer")
    parser.add_argument("--profile", default=None,
                        help="tuning profile to overlay (classic, latest)")
    parser.add_argument("--tuning", default=None,
                        help="path to an alternative tuning.toml")
    args = parser.parse_args(argv)

    tuning.load(args.tuning, profile=args.profile)

    try:
        app = App(title=tuning.get("driver", "title", "Pixel Realm"),
                  width=int(tuning.get("driver", "width", 1280)),
                  height=int(tuning.get("driver", "height", 720)))
    except SurfaceUnavailable as exc:
        print(f"[MAIN] {exc}")
        return 1

    app.push_scene(PlatformerScene())
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
