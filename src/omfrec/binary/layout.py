# Fixed sizes of the REC container.

PROFILE_SLOTS = 2
HACK_TIME_SIZE = 428       # opaque block overlaying the serialized profile
PROFILE_TRAILER_SIZE = 168 # palette/sprite remnants, zero on save
HEADER_SCALARS_SIZE = 24   # i8 i8 i8 i16x8 i32 i8
SCORES_SIZE = 8

# 2 x (428 + 168) + 8 + 24
MIN_REC_SIZE = 1224

MOVE_BASE_SIZE = 7         # tick u32, extra u8, player u8, action u8
MOVE_EXTRA_SIZE = 7        # payload following records with extra > 2
MOVE_EXTRA_THRESHOLD = 2

# remaining // MOVE_SIZE_HINT gives a capacity hint for the move list
MOVE_SIZE_HINT = 7
