"""Language registry.

Closed enumeration of the ISO 639-1 languages a translation may be
written in. Members are named by upper-case code (Language.ES) and their
value is the lower-case code ("es"), which is also the key used in
translation source files.

Construction is case-insensitive: Language("ES") is Language.ES.
Display names come from Babel CLDR data.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

from __future__ import annotations

from translatable.enums import CaseInsensitiveStrEnum
from translatable.locale_utils import get_babel_locale, get_language_name

__all__ = ["Language"]


class Language(CaseInsensitiveStrEnum):
    """ISO 639-1 language.

    StrEnum provides automatic string conversion: str(Language.ES) == "es"

    Example:
        >>> Language("ES") is Language.ES
        True
        >>> Language.ES.display_name
        'Spanish'
        >>> Language.from_locale("es-MX")
        <Language.ES: 'es'>
    """

    AA = "aa"
    AB = "ab"
    AE = "ae"
    AF = "af"
    AK = "ak"
    AM = "am"
    AN = "an"
    AR = "ar"
    AS = "as"
    AV = "av"
    AY = "ay"
    AZ = "az"
    BA = "ba"
    BE = "be"
    BG = "bg"
    BH = "bh"
    BI = "bi"
    BM = "bm"
    BN = "bn"
    BO = "bo"
    BR = "br"
    BS = "bs"
    CA = "ca"
    CE = "ce"
    CH = "ch"
    CO = "co"
    CR = "cr"
    CS = "cs"
    CU = "cu"
    CV = "cv"
    CY = "cy"
    DA = "da"
    DE = "de"
    DV = "dv"
    DZ = "dz"
    EE = "ee"
    EL = "el"
    EN = "en"
    EO = "eo"
    ES = "es"
    ET = "et"
    EU = "eu"
    FA = "fa"
    FF = "ff"
    FI = "fi"
    FJ = "fj"
    FO = "fo"
    FR = "fr"
    FY = "fy"
    GA = "ga"
    GD = "gd"
    GL = "gl"
    GN = "gn"
    GU = "gu"
    GV = "gv"
    HA = "ha"
    HE = "he"
    HI = "hi"
    HO = "ho"
    HR = "hr"
    HT = "ht"
    HU = "hu"
    HY = "hy"
    HZ = "hz"
    IA = "ia"
    ID = "id"
    IE = "ie"
    IG = "ig"
    II = "ii"
    IK = "ik"
    IO = "io"
    IS = "is"
    IT = "it"
    IU = "iu"
    JA = "ja"
    JV = "jv"
    KA = "ka"
    KG = "kg"
    KI = "ki"
    KJ = "kj"
    KK = "kk"
    KL = "kl"
    KM = "km"
    KN = "kn"
    KO = "ko"
    KR = "kr"
    KS = "ks"
    KU = "ku"
    KV = "kv"
    KW = "kw"
    KY = "ky"
    LA = "la"
    LB = "lb"
    LG = "lg"
    LI = "li"
    LN = "ln"
    LO = "lo"
    LT = "lt"
    LU = "lu"
    LV = "lv"
    MG = "mg"
    MH = "mh"
    MI = "mi"
    MK = "mk"
    ML = "ml"
    MN = "mn"
    MR = "mr"
    MS = "ms"
    MT = "mt"
    MY = "my"
    NA = "na"
    NB = "nb"
    ND = "nd"
    NE = "ne"
    NG = "ng"
    NL = "nl"
    NN = "nn"
    NO = "no"
    NR = "nr"
    NV = "nv"
    NY = "ny"
    OC = "oc"
    OJ = "oj"
    OM = "om"
    OR = "or"
    OS = "os"
    PA = "pa"
    PI = "pi"
    PL = "pl"
    PS = "ps"
    PT = "pt"
    QU = "qu"
    RM = "rm"
    RN = "rn"
    RO = "ro"
    RU = "ru"
    RW = "rw"
    SA = "sa"
    SC = "sc"
    SD = "sd"
    SE = "se"
    SG = "sg"
    SI = "si"
    SK = "sk"
    SL = "sl"
    SM = "sm"
    SN = "sn"
    SO = "so"
    SQ = "sq"
    SR = "sr"
    SS = "ss"
    ST = "st"
    SU = "su"
    SV = "sv"
    SW = "sw"
    TA = "ta"
    TE = "te"
    TG = "tg"
    TH = "th"
    TI = "ti"
    TK = "tk"
    TL = "tl"
    TN = "tn"
    TO = "to"
    TR = "tr"
    TS = "ts"
    TT = "tt"
    TW = "tw"
    TY = "ty"
    UG = "ug"
    UK = "uk"
    UR = "ur"
    UZ = "uz"
    VE = "ve"
    VI = "vi"
    VO = "vo"
    WA = "wa"
    WO = "wo"
    XH = "xh"
    YI = "yi"
    YO = "yo"
    ZA = "za"
    ZH = "zh"
    ZU = "zu"

    @property
    def code(self) -> str:
        """Canonical lower-case ISO 639-1 code."""
        return self.value

    @property
    def display_name(self) -> str:
        """English display name, or the upper-case code if CLDR has none."""
        return get_language_name(self.value) or self.value.upper()

    @classmethod
    def from_locale(cls, locale_code: str) -> Language:
        """Map a full locale tag to its language.

        Args:
            locale_code: BCP-47 or POSIX locale tag ("es-MX", "pt_BR", "en")

        Returns:
            The Language of the tag

        Raises:
            ValueError: If Babel does not recognize the tag, or its language
                has no ISO 639-1 code
        """
        # Lazy import: Babel loads CLDR data at import time; defer until needed
        from babel.core import UnknownLocaleError  # noqa: PLC0415

        try:
            locale = get_babel_locale(locale_code)
        except (UnknownLocaleError, ValueError) as e:
            msg = f"Unknown locale '{locale_code}': {e}"
            raise ValueError(msg) from e
        return cls(locale.language)
