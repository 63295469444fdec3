APP_NAME = "ETTA Scaffold"
APP_VERSION = "1.0.0"

# pack.mcmeta "pack_format" written into every generated pack
PACK_FORMAT = 64

PACK_META_FILENAME = "pack.mcmeta"
SCAFFOLD_DIR_SUFFIX = ".etta"
ITEM_META_SUFFIX = ".mcmetax"
FRAMES_DIRNAME = "frames"

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INVALID_ITEM_PATH = 2
EXIT_IO_ERROR = 74  # sysexits EX_IOERR
