"""Static Unicode block table and the block classifier used for features.

Each row of `BLOCKS` is `(first, last, block_id, name)`. The ids follow the
ICU `UBlockCode` enumeration, which numbers blocks in the order they were
added to Unicode rather than by code point, so the ids in this table are not
monotonic. Rows are sorted by `first` and never overlap, which lets
`unicode_block` find a code point with a single `bisect`.

Models trained for the `budoux-v1` key scheme embed these ids in their block
features (`UB3:062` for Hiragana, for instance), so the numbering must stay
fixed.
"""
from __future__ import annotations
from bisect import bisect_right
from typing import Tuple

from .errors import InputError

NO_BLOCK = 0
BLOCK_CODE_WIDTH = 3

BLOCKS: Tuple[Tuple[int, int, int, str], ...] = (
    (0x0000, 0x007F, 1, "BASIC_LATIN"),
    (0x0080, 0x00FF, 2, "LATIN_1_SUPPLEMENT"),
    (0x0100, 0x017F, 3, "LATIN_EXTENDED_A"),
    (0x0180, 0x024F, 4, "LATIN_EXTENDED_B"),
    (0x0250, 0x02AF, 5, "IPA_EXTENSIONS"),
    (0x02B0, 0x02FF, 6, "SPACING_MODIFIER_LETTERS"),
    (0x0300, 0x036F, 7, "COMBINING_DIACRITICAL_MARKS"),
    (0x0370, 0x03FF, 8, "GREEK"),
    (0x0400, 0x04FF, 9, "CYRILLIC"),
    (0x0500, 0x052F, 97, "CYRILLIC_SUPPLEMENT"),
    (0x0530, 0x058F, 10, "ARMENIAN"),
    (0x0590, 0x05FF, 11, "HEBREW"),
    (0x0600, 0x06FF, 12, "ARABIC"),
    (0x0700, 0x074F, 13, "SYRIAC"),
    (0x0750, 0x077F, 128, "ARABIC_SUPPLEMENT"),
    (0x0780, 0x07BF, 14, "THAANA"),
    (0x07C0, 0x07FF, 146, "NKO"),
    (0x0800, 0x083F, 172, "SAMARITAN"),
    (0x0840, 0x085F, 198, "MANDAIC"),
    (0x0860, 0x086F, 279, "SYRIAC_SUPPLEMENT"),
    (0x0870, 0x089F, 309, "ARABIC_EXTENDED_B"),
    (0x08A0, 0x08FF, 210, "ARABIC_EXTENDED_A"),
    (0x0900, 0x097F, 15, "DEVANAGARI"),
    (0x0980, 0x09FF, 16, "BENGALI"),
    (0x0A00, 0x0A7F, 17, "GURMUKHI"),
    (0x0A80, 0x0AFF, 18, "GUJARATI"),
    (0x0B00, 0x0B7F, 19, "ORIYA"),
    (0x0B80, 0x0BFF, 20, "TAMIL"),
    (0x0C00, 0x0C7F, 21, "TELUGU"),
    (0x0C80, 0x0CFF, 22, "KANNADA"),
    (0x0D00, 0x0D7F, 23, "MALAYALAM"),
    (0x0D80, 0x0DFF, 24, "SINHALA"),
    (0x0E00, 0x0E7F, 25, "THAI"),
    (0x0E80, 0x0EFF, 26, "LAO"),
    (0x0F00, 0x0FFF, 27, "TIBETAN"),
    (0x1000, 0x109F, 28, "MYANMAR"),
    (0x10A0, 0x10FF, 29, "GEORGIAN"),
    (0x1100, 0x11FF, 30, "HANGUL_JAMO"),
    (0x1200, 0x137F, 31, "ETHIOPIC"),
    (0x1380, 0x139F, 134, "ETHIOPIC_SUPPLEMENT"),
    (0x13A0, 0x13FF, 32, "CHEROKEE"),
    (0x1400, 0x167F, 33, "UNIFIED_CANADIAN_ABORIGINAL_SYLLABICS"),
    (0x1680, 0x169F, 34, "OGHAM"),
    (0x16A0, 0x16FF, 35, "RUNIC"),
    (0x1700, 0x171F, 98, "TAGALOG"),
    (0x1720, 0x173F, 99, "HANUNOO"),
    (0x1740, 0x175F, 100, "BUHID"),
    (0x1760, 0x177F, 101, "TAGBANWA"),
    (0x1780, 0x17FF, 36, "KHMER"),
    (0x1800, 0x18AF, 37, "MONGOLIAN"),
    (0x18B0, 0x18FF, 173, "UNIFIED_CANADIAN_ABORIGINAL_SYLLABICS_EXTENDED"),
    (0x1900, 0x194F, 111, "LIMBU"),
    (0x1950, 0x197F, 112, "TAI_LE"),
    (0x1980, 0x19DF, 139, "NEW_TAI_LUE"),
    (0x19E0, 0x19FF, 113, "KHMER_SYMBOLS"),
    (0x1A00, 0x1A1F, 129, "BUGINESE"),
    (0x1A20, 0x1AAF, 174, "TAI_THAM"),
    (0x1AB0, 0x1AFF, 224, "COMBINING_DIACRITICAL_MARKS_EXTENDED"),
    (0x1B00, 0x1B7F, 147, "BALINESE"),
    (0x1B80, 0x1BBF, 155, "SUNDANESE"),
    (0x1BC0, 0x1BFF, 199, "BATAK"),
    (0x1C00, 0x1C4F, 156, "LEPCHA"),
    (0x1C50, 0x1C7F, 157, "OL_CHIKI"),
    (0x1C80, 0x1C8F, 265, "CYRILLIC_EXTENDED_C"),
    (0x1C90, 0x1CBF, 283, "GEORGIAN_EXTENDED"),
    (0x1CC0, 0x1CCF, 219, "SUNDANESE_SUPPLEMENT"),
    (0x1CD0, 0x1CFF, 175, "VEDIC_EXTENSIONS"),
    (0x1D00, 0x1D7F, 114, "PHONETIC_EXTENSIONS"),
    (0x1D80, 0x1DBF, 141, "PHONETIC_EXTENSIONS_SUPPLEMENT"),
    (0x1DC0, 0x1DFF, 131, "COMBINING_DIACRITICAL_MARKS_SUPPLEMENT"),
    (0x1E00, 0x1EFF, 38, "LATIN_EXTENDED_ADDITIONAL"),
    (0x1F00, 0x1FFF, 39, "GREEK_EXTENDED"),
    (0x2000, 0x206F, 40, "GENERAL_PUNCTUATION"),
    (0x2070, 0x209F, 41, "SUPERSCRIPTS_AND_SUBSCRIPTS"),
    (0x20A0, 0x20CF, 42, "CURRENCY_SYMBOLS"),
    (0x20D0, 0x20FF, 43, "COMBINING_MARKS_FOR_SYMBOLS"),
    (0x2100, 0x214F, 44, "LETTERLIKE_SYMBOLS"),
    (0x2150, 0x218F, 45, "NUMBER_FORMS"),
    (0x2190, 0x21FF, 46, "ARROWS"),
    (0x2200, 0x22FF, 47, "MATHEMATICAL_OPERATORS"),
    (0x2300, 0x23FF, 48, "MISCELLANEOUS_TECHNICAL"),
    (0x2400, 0x243F, 49, "CONTROL_PICTURES"),
    (0x2440, 0x245F, 50, "OPTICAL_CHARACTER_RECOGNITION"),
    (0x2460, 0x24FF, 51, "ENCLOSED_ALPHANUMERICS"),
    (0x2500, 0x257F, 52, "BOX_DRAWING"),
    (0x2580, 0x259F, 53, "BLOCK_ELEMENTS"),
    (0x25A0, 0x25FF, 54, "GEOMETRIC_SHAPES"),
    (0x2600, 0x26FF, 55, "MISCELLANEOUS_SYMBOLS"),
    (0x2700, 0x27BF, 56, "DINGBATS"),
    (0x27C0, 0x27EF, 102, "MISCELLANEOUS_MATHEMATICAL_SYMBOLS_A"),
    (0x27F0, 0x27FF, 103, "SUPPLEMENTAL_ARROWS_A"),
    (0x2800, 0x28FF, 57, "BRAILLE_PATTERNS"),
    (0x2900, 0x297F, 104, "SUPPLEMENTAL_ARROWS_B"),
    (0x2980, 0x29FF, 105, "MISCELLANEOUS_MATHEMATICAL_SYMBOLS_B"),
    (0x2A00, 0x2AFF, 106, "SUPPLEMENTAL_MATHEMATICAL_OPERATORS"),
    (0x2B00, 0x2BFF, 115, "MISCELLANEOUS_SYMBOLS_AND_ARROWS"),
    (0x2C00, 0x2C5F, 136, "GLAGOLITIC"),
    (0x2C60, 0x2C7F, 148, "LATIN_EXTENDED_C"),
    (0x2C80, 0x2CFF, 132, "COPTIC"),
    (0x2D00, 0x2D2F, 135, "GEORGIAN_SUPPLEMENT"),
    (0x2D30, 0x2D7F, 144, "TIFINAGH"),
    (0x2D80, 0x2DDF, 133, "ETHIOPIC_EXTENDED"),
    (0x2DE0, 0x2DFF, 158, "CYRILLIC_EXTENDED_A"),
    (0x2E00, 0x2E7F, 142, "SUPPLEMENTAL_PUNCTUATION"),
    (0x2E80, 0x2EFF, 58, "CJK_RADICALS_SUPPLEMENT"),
    (0x2F00, 0x2FDF, 59, "KANGXI_RADICALS"),
    (0x2FF0, 0x2FFF, 60, "IDEOGRAPHIC_DESCRIPTION_CHARACTERS"),
    (0x3000, 0x303F, 61, "CJK_SYMBOLS_AND_PUNCTUATION"),
    (0x3040, 0x309F, 62, "HIRAGANA"),
    (0x30A0, 0x30FF, 63, "KATAKANA"),
    (0x3100, 0x312F, 64, "BOPOMOFO"),
    (0x3130, 0x318F, 65, "HANGUL_COMPATIBILITY_JAMO"),
    (0x3190, 0x319F, 66, "KANBUN"),
    (0x31A0, 0x31BF, 67, "BOPOMOFO_EXTENDED"),
    (0x31C0, 0x31EF, 130, "CJK_STROKES"),
    (0x31F0, 0x31FF, 107, "KATAKANA_PHONETIC_EXTENSIONS"),
    (0x3200, 0x32FF, 68, "ENCLOSED_CJK_LETTERS_AND_MONTHS"),
    (0x3300, 0x33FF, 69, "CJK_COMPATIBILITY"),
    (0x3400, 0x4DBF, 70, "CJK_UNIFIED_IDEOGRAPHS_EXTENSION_A"),
    (0x4DC0, 0x4DFF, 116, "YIJING_HEXAGRAM_SYMBOLS"),
    (0x4E00, 0x9FFF, 71, "CJK_UNIFIED_IDEOGRAPHS"),
    (0xA000, 0xA48F, 72, "YI_SYLLABLES"),
    (0xA490, 0xA4CF, 73, "YI_RADICALS"),
    (0xA4D0, 0xA4FF, 176, "LISU"),
    (0xA500, 0xA63F, 159, "VAI"),
    (0xA640, 0xA69F, 160, "CYRILLIC_EXTENDED_B"),
    (0xA6A0, 0xA6FF, 177, "BAMUM"),
    (0xA700, 0xA71F, 138, "MODIFIER_TONE_LETTERS"),
    (0xA720, 0xA7FF, 149, "LATIN_EXTENDED_D"),
    (0xA800, 0xA82F, 143, "SYLOTI_NAGRI"),
    (0xA830, 0xA83F, 178, "COMMON_INDIC_NUMBER_FORMS"),
    (0xA840, 0xA87F, 150, "PHAGS_PA"),
    (0xA880, 0xA8DF, 161, "SAURASHTRA"),
    (0xA8E0, 0xA8FF, 179, "DEVANAGARI_EXTENDED"),
    (0xA900, 0xA92F, 162, "KAYAH_LI"),
    (0xA930, 0xA95F, 163, "REJANG"),
    (0xA960, 0xA97F, 180, "HANGUL_JAMO_EXTENDED_A"),
    (0xA980, 0xA9DF, 181, "JAVANESE"),
    (0xA9E0, 0xA9FF, 238, "MYANMAR_EXTENDED_B"),
    (0xAA00, 0xAA5F, 164, "CHAM"),
    (0xAA60, 0xAA7F, 182, "MYANMAR_EXTENDED_A"),
    (0xAA80, 0xAADF, 183, "TAI_VIET"),
    (0xAAE0, 0xAAFF, 213, "MEETEI_MAYEK_EXTENSIONS"),
    (0xAB00, 0xAB2F, 200, "ETHIOPIC_EXTENDED_A"),
    (0xAB30, 0xAB6F, 231, "LATIN_EXTENDED_E"),
    (0xAB70, 0xABBF, 255, "CHEROKEE_SUPPLEMENT"),
    (0xABC0, 0xABFF, 184, "MEETEI_MAYEK"),
    (0xAC00, 0xD7AF, 74, "HANGUL_SYLLABLES"),
    (0xD7B0, 0xD7FF, 185, "HANGUL_JAMO_EXTENDED_B"),
    (0xD800, 0xDB7F, 75, "HIGH_SURROGATES"),
    (0xDB80, 0xDBFF, 76, "HIGH_PRIVATE_USE_SURROGATES"),
    (0xDC00, 0xDFFF, 77, "LOW_SURROGATES"),
    (0xE000, 0xF8FF, 78, "PRIVATE_USE_AREA"),
    (0xF900, 0xFAFF, 79, "CJK_COMPATIBILITY_IDEOGRAPHS"),
    (0xFB00, 0xFB4F, 80, "ALPHABETIC_PRESENTATION_FORMS"),
    (0xFB50, 0xFDFF, 81, "ARABIC_PRESENTATION_FORMS_A"),
    (0xFE00, 0xFE0F, 108, "VARIATION_SELECTORS"),
    (0xFE10, 0xFE1F, 145, "VERTICAL_FORMS"),
    (0xFE20, 0xFE2F, 82, "COMBINING_HALF_MARKS"),
    (0xFE30, 0xFE4F, 83, "CJK_COMPATIBILITY_FORMS"),
    (0xFE50, 0xFE6F, 84, "SMALL_FORM_VARIANTS"),
    (0xFE70, 0xFEFF, 85, "ARABIC_PRESENTATION_FORMS_B"),
    (0xFF00, 0xFFEF, 87, "HALFWIDTH_AND_FULLWIDTH_FORMS"),
    (0xFFF0, 0xFFFF, 86, "SPECIALS"),
    (0x10000, 0x1007F, 117, "LINEAR_B_SYLLABARY"),
    (0x10080, 0x100FF, 118, "LINEAR_B_IDEOGRAMS"),
    (0x10100, 0x1013F, 119, "AEGEAN_NUMBERS"),
    (0x10140, 0x1018F, 127, "ANCIENT_GREEK_NUMBERS"),
    (0x10190, 0x101CF, 165, "ANCIENT_SYMBOLS"),
    (0x101D0, 0x101FF, 166, "PHAISTOS_DISC"),
    (0x10280, 0x1029F, 167, "LYCIAN"),
    (0x102A0, 0x102DF, 168, "CARIAN"),
    (0x102E0, 0x102FF, 223, "COPTIC_EPACT_NUMBERS"),
    (0x10300, 0x1032F, 88, "OLD_ITALIC"),
    (0x10330, 0x1034F, 89, "GOTHIC"),
    (0x10350, 0x1037F, 241, "OLD_PERMIC"),
    (0x10380, 0x1039F, 120, "UGARITIC"),
    (0x103A0, 0x103DF, 140, "OLD_PERSIAN"),
    (0x10400, 0x1044F, 90, "DESERET"),
    (0x10450, 0x1047F, 121, "SHAVIAN"),
    (0x10480, 0x104AF, 122, "OSMANYA"),
    (0x104B0, 0x104FF, 271, "OSAGE"),
    (0x10500, 0x1052F, 226, "ELBASAN"),
    (0x10530, 0x1056F, 222, "CAUCASIAN_ALBANIAN"),
    (0x10570, 0x105BF, 319, "VITHKUQI"),
    (0x10600, 0x1077F, 232, "LINEAR_A"),
    (0x10780, 0x107BF, 313, "LATIN_EXTENDED_F"),
    (0x10800, 0x1083F, 123, "CYPRIOT_SYLLABARY"),
    (0x10840, 0x1085F, 186, "IMPERIAL_ARAMAIC"),
    (0x10860, 0x1087F, 244, "PALMYRENE"),
    (0x10880, 0x108AF, 239, "NABATAEAN"),
    (0x108E0, 0x108FF, 258, "HATRAN"),
    (0x10900, 0x1091F, 151, "PHOENICIAN"),
    (0x10920, 0x1093F, 169, "LYDIAN"),
    (0x10980, 0x1099F, 215, "MEROITIC_HIEROGLYPHS"),
    (0x109A0, 0x109FF, 214, "MEROITIC_CURSIVE"),
    (0x10A00, 0x10A5F, 137, "KHAROSHTHI"),
    (0x10A60, 0x10A7F, 187, "OLD_SOUTH_ARABIAN"),
    (0x10A80, 0x10A9F, 240, "OLD_NORTH_ARABIAN"),
    (0x10AC0, 0x10AFF, 234, "MANICHAEAN"),
    (0x10B00, 0x10B3F, 188, "AVESTAN"),
    (0x10B40, 0x10B5F, 189, "INSCRIPTIONAL_PARTHIAN"),
    (0x10B60, 0x10B7F, 190, "INSCRIPTIONAL_PAHLAVI"),
    (0x10B80, 0x10BAF, 246, "PSALTER_PAHLAVI"),
    (0x10C00, 0x10C4F, 191, "OLD_TURKIC"),
    (0x10C80, 0x10CFF, 260, "OLD_HUNGARIAN"),
    (0x10D00, 0x10D3F, 285, "HANIFI_ROHINGYA"),
    (0x10E60, 0x10E7F, 192, "RUMI_NUMERAL_SYMBOLS"),
    (0x10E80, 0x10EBF, 308, "YEZIDI"),
    (0x10EC0, 0x10EFF, 321, "ARABIC_EXTENDED_C"),
    (0x10F00, 0x10F2F, 290, "OLD_SOGDIAN"),
    (0x10F30, 0x10F6F, 291, "SOGDIAN"),
    (0x10F70, 0x10FAF, 315, "OLD_UYGHUR"),
    (0x10FB0, 0x10FDF, 301, "CHORASMIAN"),
    (0x10FE0, 0x10FFF, 293, "ELYMAIC"),
    (0x11000, 0x1107F, 201, "BRAHMI"),
    (0x11080, 0x110CF, 193, "KAITHI"),
    (0x110D0, 0x110FF, 218, "SORA_SOMPENG"),
    (0x11100, 0x1114F, 212, "CHAKMA"),
    (0x11150, 0x1117F, 233, "MAHAJANI"),
    (0x11180, 0x111DF, 217, "SHARADA"),
    (0x111E0, 0x111FF, 249, "SINHALA_ARCHAIC_NUMBERS"),
    (0x11200, 0x1124F, 229, "KHOJKI"),
    (0x11280, 0x112AF, 259, "MULTANI"),
    (0x112B0, 0x112FF, 230, "KHUDAWADI"),
    (0x11300, 0x1137F, 228, "GRANTHA"),
    (0x11400, 0x1147F, 270, "NEWA"),
    (0x11480, 0x114DF, 251, "TIRHUTA"),
    (0x11580, 0x115FF, 248, "SIDDHAM"),
    (0x11600, 0x1165F, 236, "MODI"),
    (0x11660, 0x1167F, 269, "MONGOLIAN_SUPPLEMENT"),
    (0x11680, 0x116CF, 220, "TAKRI"),
    (0x11700, 0x1174F, 253, "AHOM"),
    (0x11800, 0x1184F, 282, "DOGRA"),
    (0x118A0, 0x118FF, 252, "WARANG_CITI"),
    (0x11900, 0x1195F, 303, "DIVES_AKURU"),
    (0x119A0, 0x119FF, 294, "NANDINAGARI"),
    (0x11A00, 0x11A4F, 280, "ZANABAZAR_SQUARE"),
    (0x11A50, 0x11AAF, 278, "SOYOMBO"),
    (0x11AB0, 0x11ABF, 318, "UNIFIED_CANADIAN_ABORIGINAL_SYLLABICS_EXTENDED_A"),
    (0x11AC0, 0x11AFF, 245, "PAU_CIN_HAU"),
    (0x11B00, 0x11B5F, 324, "DEVANAGARI_EXTENDED_A"),
    (0x11C00, 0x11C6F, 264, "BHAIKSUKI"),
    (0x11C70, 0x11CBF, 268, "MARCHEN"),
    (0x11D00, 0x11D5F, 276, "MASARAM_GONDI"),
    (0x11D60, 0x11DAF, 284, "GUNJALA_GONDI"),
    (0x11EE0, 0x11EFF, 287, "MAKASAR"),
    (0x11F00, 0x11F5F, 326, "KAWI"),
    (0x11FB0, 0x11FBF, 305, "LISU_SUPPLEMENT"),
    (0x11FC0, 0x11FFF, 299, "TAMIL_SUPPLEMENT"),
    (0x12000, 0x123FF, 152, "CUNEIFORM"),
    (0x12400, 0x1247F, 153, "CUNEIFORM_NUMBERS_AND_PUNCTUATION"),
    (0x12480, 0x1254F, 257, "EARLY_DYNASTIC_CUNEIFORM"),
    (0x12F90, 0x12FFF, 310, "CYPRO_MINOAN"),
    (0x13000, 0x1342F, 194, "EGYPTIAN_HIEROGLYPHS"),
    (0x13430, 0x1345F, 292, "EGYPTIAN_HIEROGLYPH_FORMAT_CONTROLS"),
    (0x14400, 0x1467F, 254, "ANATOLIAN_HIEROGLYPHS"),
    (0x16800, 0x16A3F, 202, "BAMUM_SUPPLEMENT"),
    (0x16A40, 0x16A6F, 237, "MRO"),
    (0x16A70, 0x16ACF, 316, "TANGSA"),
    (0x16AD0, 0x16AFF, 221, "BASSA_VAH"),
    (0x16B00, 0x16B8F, 243, "PAHAWH_HMONG"),
    (0x16E40, 0x16E9F, 289, "MEDEFAIDRIN"),
    (0x16F00, 0x16F9F, 216, "MIAO"),
    (0x16FE0, 0x16FFF, 267, "IDEOGRAPHIC_SYMBOLS_AND_PUNCTUATION"),
    (0x17000, 0x187FF, 272, "TANGUT"),
    (0x18800, 0x18AFF, 273, "TANGUT_COMPONENTS"),
    (0x18B00, 0x18CFF, 304, "KHITAN_SMALL_SCRIPT"),
    (0x18D00, 0x18D7F, 307, "TANGUT_SUPPLEMENT"),
    (0x1AFF0, 0x1AFFF, 312, "KANA_EXTENDED_B"),
    (0x1B000, 0x1B0FF, 203, "KANA_SUPPLEMENT"),
    (0x1B100, 0x1B12F, 275, "KANA_EXTENDED_A"),
    (0x1B130, 0x1B16F, 297, "SMALL_KANA_EXTENSION"),
    (0x1B170, 0x1B2FF, 277, "NUSHU"),
    (0x1BC00, 0x1BC9F, 225, "DUPLOYAN"),
    (0x1BCA0, 0x1BCAF, 247, "SHORTHAND_FORMAT_CONTROLS"),
    (0x1CF00, 0x1CFCF, 320, "ZNAMENNY_MUSICAL_NOTATION"),
    (0x1D000, 0x1D0FF, 91, "BYZANTINE_MUSICAL_SYMBOLS"),
    (0x1D100, 0x1D1FF, 92, "MUSICAL_SYMBOLS"),
    (0x1D200, 0x1D24F, 126, "ANCIENT_GREEK_MUSICAL_NOTATION"),
    (0x1D2C0, 0x1D2DF, 325, "KAKTOVIK_NUMERALS"),
    (0x1D2E0, 0x1D2FF, 288, "MAYAN_NUMERALS"),
    (0x1D300, 0x1D35F, 124, "TAI_XUAN_JING_SYMBOLS"),
    (0x1D360, 0x1D37F, 154, "COUNTING_ROD_NUMERALS"),
    (0x1D400, 0x1D7FF, 93, "MATHEMATICAL_ALPHANUMERIC_SYMBOLS"),
    (0x1D800, 0x1DAAF, 262, "SUTTON_SIGNWRITING"),
    (0x1DF00, 0x1DFFF, 314, "LATIN_EXTENDED_G"),
    (0x1E000, 0x1E02F, 266, "GLAGOLITIC_SUPPLEMENT"),
    (0x1E030, 0x1E08F, 323, "CYRILLIC_EXTENDED_D"),
    (0x1E100, 0x1E14F, 295, "NYIAKENG_PUACHUE_HMONG"),
    (0x1E290, 0x1E2BF, 317, "TOTO"),
    (0x1E2C0, 0x1E2FF, 300, "WANCHO"),
    (0x1E4D0, 0x1E4FF, 327, "NAG_MUNDARI"),
    (0x1E7E0, 0x1E7FF, 311, "ETHIOPIC_EXTENDED_B"),
    (0x1E800, 0x1E8DF, 235, "MENDE_KIKAKUI"),
    (0x1E900, 0x1E95F, 263, "ADLAM"),
    (0x1EC70, 0x1ECBF, 286, "INDIC_SIYAQ_NUMBERS"),
    (0x1ED00, 0x1ED4F, 296, "OTTOMAN_SIYAQ_NUMBERS"),
    (0x1EE00, 0x1EEFF, 211, "ARABIC_MATHEMATICAL_ALPHABETIC_SYMBOLS"),
    (0x1F000, 0x1F02F, 170, "MAHJONG_TILES"),
    (0x1F030, 0x1F09F, 171, "DOMINO_TILES"),
    (0x1F0A0, 0x1F0FF, 204, "PLAYING_CARDS"),
    (0x1F100, 0x1F1FF, 195, "ENCLOSED_ALPHANUMERIC_SUPPLEMENT"),
    (0x1F200, 0x1F2FF, 196, "ENCLOSED_IDEOGRAPHIC_SUPPLEMENT"),
    (0x1F300, 0x1F5FF, 205, "MISCELLANEOUS_SYMBOLS_AND_PICTOGRAPHS"),
    (0x1F600, 0x1F64F, 206, "EMOTICONS"),
    (0x1F650, 0x1F67F, 242, "ORNAMENTAL_DINGBATS"),
    (0x1F680, 0x1F6FF, 207, "TRANSPORT_AND_MAP_SYMBOLS"),
    (0x1F700, 0x1F77F, 208, "ALCHEMICAL_SYMBOLS"),
    (0x1F780, 0x1F7FF, 227, "GEOMETRIC_SHAPES_EXTENDED"),
    (0x1F800, 0x1F8FF, 250, "SUPPLEMENTAL_ARROWS_C"),
    (0x1F900, 0x1F9FF, 261, "SUPPLEMENTAL_SYMBOLS_AND_PICTOGRAPHS"),
    (0x1FA00, 0x1FA6F, 281, "CHESS_SYMBOLS"),
    (0x1FA70, 0x1FAFF, 298, "SYMBOLS_AND_PICTOGRAPHS_EXTENDED_A"),
    (0x1FB00, 0x1FBFF, 306, "SYMBOLS_FOR_LEGACY_COMPUTING"),
    (0x20000, 0x2A6DF, 94, "CJK_UNIFIED_IDEOGRAPHS_EXTENSION_B"),
    (0x2A700, 0x2B73F, 197, "CJK_UNIFIED_IDEOGRAPHS_EXTENSION_C"),
    (0x2B740, 0x2B81F, 209, "CJK_UNIFIED_IDEOGRAPHS_EXTENSION_D"),
    (0x2B820, 0x2CEAF, 256, "CJK_UNIFIED_IDEOGRAPHS_EXTENSION_E"),
    (0x2CEB0, 0x2EBEF, 274, "CJK_UNIFIED_IDEOGRAPHS_EXTENSION_F"),
    (0x2EBF0, 0x2EE5F, 328, "CJK_UNIFIED_IDEOGRAPHS_EXTENSION_I"),
    (0x2F800, 0x2FA1F, 95, "CJK_COMPATIBILITY_IDEOGRAPHS_SUPPLEMENT"),
    (0x30000, 0x3134F, 302, "CJK_UNIFIED_IDEOGRAPHS_EXTENSION_G"),
    (0x31350, 0x323AF, 322, "CJK_UNIFIED_IDEOGRAPHS_EXTENSION_H"),
    (0xE0000, 0xE007F, 96, "TAGS"),
    (0xE0100, 0xE01EF, 125, "VARIATION_SELECTORS_SUPPLEMENT"),
    (0xF0000, 0xFFFFF, 109, "SUPPLEMENTARY_PRIVATE_USE_AREA_A"),
    (0x100000, 0x10FFFF, 110, "SUPPLEMENTARY_PRIVATE_USE_AREA_B"),
)

_STARTS = tuple(row[0] for row in BLOCKS)


def _find_row(cp: int) -> Tuple[int, int, int, str] | None:
    pos = bisect_right(_STARTS, cp) - 1
    if pos < 0:
        return None
    row = BLOCKS[pos]
    return row if cp <= row[1] else None


def block_id(ch: str) -> int:
    """Returns the ICU block enumeration id of `ch`, or `NO_BLOCK`."""
    if not isinstance(ch, str) or len(ch) != 1:
        raise InputError(f"Expected a single code point, got {ch!r}.")
    row = _find_row(ord(ch))
    return row[2] if row else NO_BLOCK


def block_name(ch: str) -> str:
    """Returns the block name of `ch` (`NO_BLOCK` when unassigned)."""
    if not isinstance(ch, str) or len(ch) != 1:
        raise InputError(f"Expected a single code point, got {ch!r}.")
    row = _find_row(ord(ch))
    return row[3] if row else "NO_BLOCK"


def unicode_block(ch: str) -> str:
    """
    Classifies a character by its Unicode block.

    The result is the block's enumeration id as a decimal string, left-padded
    with zeros to three digits, so Hiragana gives "062" and Basic Latin gives
    "001". Unassigned code points give "000".

    Args:
        ch: A single code point. Lone surrogates are rejected because they
            can only come from malformed text.

    Returns:
        The three-digit block code.

    Raises:
        InputError: If `ch` is not exactly one well-formed code point.
    """
    if isinstance(ch, str) and len(ch) == 1 and 0xD800 <= ord(ch) <= 0xDFFF:
        raise InputError(f"Lone surrogate U+{ord(ch):04X} is not a valid character.")
    return f"{block_id(ch):0{BLOCK_CODE_WIDTH}d}"
