import sys
import time
import ctypes
import traceback
from DarkScreenScripts.gui import DarkScreenGUI


def main():
    # Sharp rendering on scaled displays
    if sys.platform == "win32":
        try:
            ctypes.windll.user32.SetProcessDPIAware()
        except Exception as e:
            print(f"WARNING: Could not enable DPI awareness: {e}")

    try:
        gui = DarkScreenGUI()
        gui.run()
    except Exception as e:
        print(f"\n\nCRITICAL ERROR: {e}")
        traceback.print_exc()
        time.sleep(3)  # Wait 3 seconds, then auto-close
        sys.exit(1)


if __name__ == "__main__":
    main()
