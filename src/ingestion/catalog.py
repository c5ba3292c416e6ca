"""Static catalog data for the complete-works anthology.

The work titles are matched in order, so a title that is a substring of a
later title must come first only when that is the intended winner. Changing
any list here changes segmentation output; bump ``CATALOG_VERSION`` when it
does.
"""

CATALOG_VERSION = "1"

SONNETS_TITLE = "THE SONNETS"

KNOWN_WORKS: tuple[str, ...] = (
    SONNETS_TITLE,
    "ALL'S WELL THAT ENDS WELL",
    "THE TRAGEDY OF ANTONY AND CLEOPATRA",
    "AS YOU LIKE IT",
    "THE COMEDY OF ERRORS",
    "THE TRAGEDY OF CORIOLANUS",
    "CYMBELINE",
    "THE TRAGEDY OF HAMLET, PRINCE OF DENMARK",
    "THE FIRST PART OF KING HENRY THE FOURTH",
    "THE SECOND PART OF KING HENRY THE FOURTH",
    "THE LIFE OF KING HENRY THE FIFTH",
    "THE FIRST PART OF HENRY THE SIXTH",
    "THE SECOND PART OF KING HENRY THE SIXTH",
    "THE THIRD PART OF KING HENRY THE SIXTH",
    "KING HENRY THE EIGHTH",
    "THE LIFE AND DEATH OF KING JOHN",
    "THE TRAGEDY OF JULIUS CAESAR",
    "THE TRAGEDY OF KING LEAR",
    "LOVE'S LABOUR'S LOST",
    "THE TRAGEDY OF MACBETH",
    "MEASURE FOR MEASURE",
    "THE MERCHANT OF VENICE",
    "THE MERRY WIVES OF WINDSOR",
    "A MIDSUMMER NIGHT'S DREAM",
    "MUCH ADO ABOUT NOTHING",
    "THE TRAGEDY OF OTHELLO, THE MOOR OF VENICE",
    "PERICLES, PRINCE OF TYRE",
    "KING RICHARD THE SECOND",
    "KING RICHARD THE THIRD",
    "THE TRAGEDY OF ROMEO AND JULIET",
    "THE TAMING OF THE SHREW",
    "THE TEMPEST",
    "THE LIFE OF TIMON OF ATHENS",
    "THE TRAGEDY OF TITUS ANDRONICUS",
    "TROILUS AND CRESSIDA",
    "TWELFTH NIGHT; OR, WHAT YOU WILL",
    "THE TWO GENTLEMEN OF VERONA",
    "THE TWO NOBLE KINSMEN",
    "THE WINTER'S TALE",
    "A LOVER'S COMPLAINT",
    "THE PASSIONATE PILGRIM",
    "THE PHOENIX AND THE TURTLE",
    "THE RAPE OF LUCRECE",
    "VENUS AND ADONIS",
)

# A speaker label starting with any of these is a structural marker.
NON_SPEAKER_MARKERS: tuple[str, ...] = (
    "ACT",
    "SCENE",
    "EPILOGUE",
    "PROLOGUE",
    "CHORUS",
    "CONTENTS",
    "THE END",
    "FINIS",
    "DRAMATIS PERSONAE",
    "PERSONS REPRESENTED",
    "INDUCTION",
    "ARGUMENT",
    "ENTER",
    "EXIT",
    "EXEUNT",
    "ALARUM",
    "FLOURISH",
    "SENNET",
    "HAUTBOYS",
    "TRUMPETS",
    "DRUMS",
    "SCENE I",
    "SCENE II",
    "SCENE III",
    "SCENE IV",
    "SCENE V",
    "ACT I",
    "ACT II",
    "ACT III",
    "ACT IV",
    "ACT V",
)

# Substrings that disqualify a speaker label anywhere in the line.
NON_SPEAKER_SUBSTRINGS: tuple[str, ...] = ("SCENE", "Contents")

STAGE_DIRECTION_PREFIXES: tuple[str, ...] = (
    "ACT",
    "SCENE",
    "EPILOGUE",
    "PROLOGUE",
    "ENTER",
    "EXIT",
    "EXEUNT",
    "ALARUM",
    "FLOURISH",
)

# Chunks whose text starts with one of these are scene headers.
HEADER_PREFIXES: tuple[str, ...] = ("ACT", "SCENE", "EPILOGUE", "PROLOGUE")
