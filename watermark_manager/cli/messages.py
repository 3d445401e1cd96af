"""User-facing text of the interactive session."""

WELCOME = (
    'Hi! Welcome to "Watermark manager". Copy your image files to {folder}/ folder. '
    "Then you'll be able to use them in the app. Are you ready?"
)
NO_SUCH_FILES = "\nFollowing file(s) seem(s) to not exist: {paths}."
RESTART = "\nProgram is going to restart, so you can try again.\n"
ERROR = "\nSomething went wrong... The program will now exit.\n"
SUCCESS = "\nDone! Check {output}.\nNow You can try with another image.\n"

ASK_INPUT_FILE = "What file do you want to mark?"
ASK_WATERMARK_TYPE = "What type of watermark would you add?"
ASK_SHOULD_EDIT = "Apart from adding a watermark, would you like to edit an image?"
ASK_EDIT_OPTIONS = "How would you like to edit an image?"
ASK_WATERMARK_TEXT = "Type your watermark text"
ASK_WATERMARK_IMAGE = "Type your watermark name"

TEXT_WATERMARK = "Text watermark"
IMAGE_WATERMARK = "Image watermark"
WATERMARK_TYPES = (TEXT_WATERMARK, IMAGE_WATERMARK)
