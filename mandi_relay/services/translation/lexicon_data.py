"""
Built-in marketplace lexicon.

PHRASE_TABLE holds whole-phrase translations keyed by "<from>_<to>".
COMMON_WORDS holds single market terms used for word-by-word substitution.
"""

PHRASE_TABLE: dict[str, dict[str, str]] = {
    "en_hi": {
        "hello": "नमस्ते",
        "how much": "कितना",
        "good price": "अच्छी कीमत",
        "too expensive": "बहुत महंगा",
        "cheap": "सस्ता",
        "deal": "सौदा",
    },
    "en_ml": {
        "hello": "നമസ്കാരം",
        "how much": "എത്ര",
        "good price": "നല്ല വില",
        "too expensive": "വളരെ ചെലവേറിയത്",
        "cheap": "വിലകുറഞ്ഞ",
        "deal": "ഇടപാട്",
    },
    "en_ta": {
        "hello": "வணக்கம்",
        "how much": "எவ்வளவு",
        "good price": "நல்ல விலை",
        "too expensive": "மிகவும் விலை உயர்ந்தது",
        "cheap": "மலிவான",
        "deal": "ஒப்பந்தம்",
    },
}

COMMON_WORDS: dict[str, dict[str, str]] = {
    "en_hi": {
        "hello": "नमस्ते",
        "price": "कीमत",
        "good": "अच्छा",
        "bad": "बुरा",
        "yes": "हाँ",
        "no": "नहीं",
        "buy": "खरीदना",
        "sell": "बेचना",
        "market": "बाजार",
        "vegetable": "सब्जी",
        "fruit": "फल",
        "kg": "किलो",
        "rupees": "रुपये",
    },
    "en_ml": {
        "hello": "നമസ്കാരം",
        "price": "വില",
        "good": "നല്ലത്",
        "bad": "മോശം",
        "yes": "അതെ",
        "no": "ഇല്ല",
        "buy": "വാങ്ങുക",
        "sell": "വിൽക്കുക",
        "market": "മാർക്കറ്റ്",
        "vegetable": "പച്ചക്കറി",
        "fruit": "പഴം",
        "kg": "കിലോ",
        "rupees": "രൂപ",
    },
    "en_ta": {
        "hello": "வணக்கம்",
        "price": "விலை",
        "good": "நல்லது",
        "bad": "கெட்டது",
        "yes": "ஆம்",
        "no": "இல்லை",
        "buy": "வாங்க",
        "sell": "விற்க",
        "market": "சந்தை",
        "vegetable": "காய்கறி",
        "fruit": "பழம்",
        "kg": "கிலோ",
        "rupees": "ரூபாய்",
    },
}
