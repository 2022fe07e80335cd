EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

class LomoError(Exception):
    exit_code = EXIT_FAILURE

# bad command line, raised before any window opens
class ArgumentError(LomoError):
    exit_code = EXIT_USAGE

class LoadError(LomoError):
    pass

# OpenCV or GUI failure while drawing, blending or displaying
class ImagingBackendError(LomoError):
    pass
