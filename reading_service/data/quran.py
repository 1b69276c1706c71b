"""
Static reference tables for the Quran.

Thirty structural parts (juz) and 114 chapters (surahs). Part verse totals are
derived from the part boundaries; ``services.reading.reference_index``
validates both tables against each other at load time.
"""

from typing import Any, Dict, List

TOTAL_VERSES = 6236

# number, name, Arabic name, start (chapter, verse), end (chapter, verse), verses
QURAN_PARTS: List[Dict[str, Any]] = [
    {"number": 1, "name": "Alif Lam Meem", "name_ar": "الم", "start": (1, 1), "end": (2, 141), "total_verses": 148},
    {"number": 2, "name": "Sayaqool", "name_ar": "سيقول", "start": (2, 142), "end": (2, 252), "total_verses": 111},
    {"number": 3, "name": "Tilka Rusul", "name_ar": "تلك الرسل", "start": (2, 253), "end": (3, 92), "total_verses": 126},
    {"number": 4, "name": "Lan Tanaloo", "name_ar": "لن تنالوا", "start": (3, 93), "end": (4, 23), "total_verses": 131},
    {"number": 5, "name": "Wal Mohsanat", "name_ar": "والمحصنات", "start": (4, 24), "end": (4, 147), "total_verses": 124},
    {"number": 6, "name": "La Yuhibbullah", "name_ar": "لا يحب الله", "start": (4, 148), "end": (5, 81), "total_verses": 110},
    {"number": 7, "name": "Wa Iza Samiu", "name_ar": "وإذا سمعوا", "start": (5, 82), "end": (6, 110), "total_verses": 149},
    {"number": 8, "name": "Wa Lau Annana", "name_ar": "ولو أننا", "start": (6, 111), "end": (7, 87), "total_verses": 142},
    {"number": 9, "name": "Qal Almalao", "name_ar": "قال الملأ", "start": (7, 88), "end": (8, 40), "total_verses": 159},
    {"number": 10, "name": "Wa Alamoo", "name_ar": "واعلموا", "start": (8, 41), "end": (9, 92), "total_verses": 127},
    {"number": 11, "name": "Yatazeroon", "name_ar": "يعتذرون", "start": (9, 93), "end": (11, 5), "total_verses": 151},
    {"number": 12, "name": "Wa Ma Min Dabbah", "name_ar": "وما من دابة", "start": (11, 6), "end": (12, 52), "total_verses": 170},
    {"number": 13, "name": "Wa Ma Ubrioo", "name_ar": "وما أبرئ", "start": (12, 53), "end": (14, 52), "total_verses": 154},
    {"number": 14, "name": "Rubama", "name_ar": "ربما", "start": (15, 1), "end": (16, 128), "total_verses": 227},
    {"number": 15, "name": "Subhan Allazi", "name_ar": "سبحان الذي", "start": (17, 1), "end": (18, 74), "total_verses": 185},
    {"number": 16, "name": "Qal Alam", "name_ar": "قال ألم", "start": (18, 75), "end": (20, 135), "total_verses": 269},
    {"number": 17, "name": "Iqtaraba", "name_ar": "اقترب", "start": (21, 1), "end": (22, 78), "total_verses": 190},
    {"number": 18, "name": "Qad Aflaha", "name_ar": "قد أفلح", "start": (23, 1), "end": (25, 20), "total_verses": 202},
    {"number": 19, "name": "Wa Qal Allazina", "name_ar": "وقال الذين", "start": (25, 21), "end": (27, 55), "total_verses": 339},
    {"number": 20, "name": "A Ammantum", "name_ar": "أمن خلق", "start": (27, 56), "end": (29, 45), "total_verses": 171},
    {"number": 21, "name": "Utlu Ma Uhiya", "name_ar": "اتل ما أوحي", "start": (29, 46), "end": (33, 30), "total_verses": 178},
    {"number": 22, "name": "Wa Man Yaqnut", "name_ar": "ومن يقنت", "start": (33, 31), "end": (36, 27), "total_verses": 169},
    {"number": 23, "name": "Wa Mali", "name_ar": "وما لي", "start": (36, 28), "end": (39, 31), "total_verses": 357},
    {"number": 24, "name": "Fa Man Azlam", "name_ar": "فمن أظلم", "start": (39, 32), "end": (41, 46), "total_verses": 175},
    {"number": 25, "name": "Ilaih Yuraddu", "name_ar": "إليه يرد", "start": (41, 47), "end": (45, 37), "total_verses": 246},
    {"number": 26, "name": "Ha Meem", "name_ar": "حم", "start": (46, 1), "end": (51, 30), "total_verses": 195},
    {"number": 27, "name": "Qala Fa Ma Khatbukum", "name_ar": "قال فما خطبكم", "start": (51, 31), "end": (57, 29), "total_verses": 399},
    {"number": 28, "name": "Qad Samia", "name_ar": "قد سمع", "start": (58, 1), "end": (66, 12), "total_verses": 137},
    {"number": 29, "name": "Tabarak Allazi", "name_ar": "تبارك الذي", "start": (67, 1), "end": (77, 50), "total_verses": 431},
    {"number": 30, "name": "Amma Yatasa aloon", "name_ar": "عم يتساءلون", "start": (78, 1), "end": (114, 6), "total_verses": 564},
]

# number, name, Arabic name, verse count, parts the chapter spans
QURAN_CHAPTERS: List[Dict[str, Any]] = [
    {"number": 1, "name": "Al-Fatiha", "name_ar": "الفاتحة", "verses": 7, "parts": (1,)},
    {"number": 2, "name": "Al-Baqarah", "name_ar": "البقرة", "verses": 286, "parts": (1, 2, 3)},
    {"number": 3, "name": "Ali-Imran", "name_ar": "آل عمران", "verses": 200, "parts": (3, 4)},
    {"number": 4, "name": "An-Nisa", "name_ar": "النساء", "verses": 176, "parts": (4, 5, 6)},
    {"number": 5, "name": "Al-Maidah", "name_ar": "المائدة", "verses": 120, "parts": (6, 7)},
    {"number": 6, "name": "Al-Anam", "name_ar": "الأنعام", "verses": 165, "parts": (7, 8)},
    {"number": 7, "name": "Al-Araf", "name_ar": "الأعراف", "verses": 206, "parts": (8, 9)},
    {"number": 8, "name": "Al-Anfal", "name_ar": "الأنفال", "verses": 75, "parts": (9, 10)},
    {"number": 9, "name": "At-Tawbah", "name_ar": "التوبة", "verses": 129, "parts": (10, 11)},
    {"number": 10, "name": "Yunus", "name_ar": "يونس", "verses": 109, "parts": (11,)},
    {"number": 11, "name": "Hud", "name_ar": "هود", "verses": 123, "parts": (11, 12)},
    {"number": 12, "name": "Yusuf", "name_ar": "يوسف", "verses": 111, "parts": (12, 13)},
    {"number": 13, "name": "Ar-Rad", "name_ar": "الرعد", "verses": 43, "parts": (13,)},
    {"number": 14, "name": "Ibrahim", "name_ar": "إبراهيم", "verses": 52, "parts": (13,)},
    {"number": 15, "name": "Al-Hijr", "name_ar": "الحجر", "verses": 99, "parts": (14,)},
    {"number": 16, "name": "An-Nahl", "name_ar": "النحل", "verses": 128, "parts": (14,)},
    {"number": 17, "name": "Al-Isra", "name_ar": "الإسراء", "verses": 111, "parts": (15,)},
    {"number": 18, "name": "Al-Kahf", "name_ar": "الكهف", "verses": 110, "parts": (15, 16)},
    {"number": 19, "name": "Maryam", "name_ar": "مريم", "verses": 98, "parts": (16,)},
    {"number": 20, "name": "Ta-Ha", "name_ar": "طه", "verses": 135, "parts": (16,)},
    {"number": 21, "name": "Al-Anbiya", "name_ar": "الأنبياء", "verses": 112, "parts": (17,)},
    {"number": 22, "name": "Al-Hajj", "name_ar": "الحج", "verses": 78, "parts": (17,)},
    {"number": 23, "name": "Al-Muminun", "name_ar": "المؤمنون", "verses": 118, "parts": (18,)},
    {"number": 24, "name": "An-Nur", "name_ar": "النور", "verses": 64, "parts": (18,)},
    {"number": 25, "name": "Al-Furqan", "name_ar": "الفرقان", "verses": 77, "parts": (18, 19)},
    {"number": 26, "name": "Ash-Shuara", "name_ar": "الشعراء", "verses": 227, "parts": (19,)},
    {"number": 27, "name": "An-Naml", "name_ar": "النمل", "verses": 93, "parts": (19, 20)},
    {"number": 28, "name": "Al-Qasas", "name_ar": "القصص", "verses": 88, "parts": (20,)},
    {"number": 29, "name": "Al-Ankabut", "name_ar": "العنكبوت", "verses": 69, "parts": (20, 21)},
    {"number": 30, "name": "Ar-Rum", "name_ar": "الروم", "verses": 60, "parts": (21,)},
    {"number": 31, "name": "Luqman", "name_ar": "لقمان", "verses": 34, "parts": (21,)},
    {"number": 32, "name": "As-Sajdah", "name_ar": "السجدة", "verses": 30, "parts": (21,)},
    {"number": 33, "name": "Al-Ahzab", "name_ar": "الأحزاب", "verses": 73, "parts": (21, 22)},
    {"number": 34, "name": "Saba", "name_ar": "سبأ", "verses": 54, "parts": (22,)},
    {"number": 35, "name": "Fatir", "name_ar": "فاطر", "verses": 45, "parts": (22,)},
    {"number": 36, "name": "Ya-Sin", "name_ar": "يس", "verses": 83, "parts": (22, 23)},
    {"number": 37, "name": "As-Saffat", "name_ar": "الصافات", "verses": 182, "parts": (23,)},
    {"number": 38, "name": "Sad", "name_ar": "ص", "verses": 88, "parts": (23,)},
    {"number": 39, "name": "Az-Zumar", "name_ar": "الزمر", "verses": 75, "parts": (23, 24)},
    {"number": 40, "name": "Ghafir", "name_ar": "غافر", "verses": 85, "parts": (24,)},
    {"number": 41, "name": "Fussilat", "name_ar": "فصلت", "verses": 54, "parts": (24, 25)},
    {"number": 42, "name": "Ash-Shuraa", "name_ar": "الشورى", "verses": 53, "parts": (25,)},
    {"number": 43, "name": "Az-Zukhruf", "name_ar": "الزخرف", "verses": 89, "parts": (25,)},
    {"number": 44, "name": "Ad-Dukhan", "name_ar": "الدخان", "verses": 59, "parts": (25,)},
    {"number": 45, "name": "Al-Jathiyah", "name_ar": "الجاثية", "verses": 37, "parts": (25,)},
    {"number": 46, "name": "Al-Ahqaf", "name_ar": "الأحقاف", "verses": 35, "parts": (26,)},
    {"number": 47, "name": "Muhammad", "name_ar": "محمد", "verses": 38, "parts": (26,)},
    {"number": 48, "name": "Al-Fath", "name_ar": "الفتح", "verses": 29, "parts": (26,)},
    {"number": 49, "name": "Al-Hujurat", "name_ar": "الحجرات", "verses": 18, "parts": (26,)},
    {"number": 50, "name": "Qaf", "name_ar": "ق", "verses": 45, "parts": (26,)},
    {"number": 51, "name": "Adh-Dhariyat", "name_ar": "الذاريات", "verses": 60, "parts": (26, 27)},
    {"number": 52, "name": "At-Tur", "name_ar": "الطور", "verses": 49, "parts": (27,)},
    {"number": 53, "name": "An-Najm", "name_ar": "النجم", "verses": 62, "parts": (27,)},
    {"number": 54, "name": "Al-Qamar", "name_ar": "القمر", "verses": 55, "parts": (27,)},
    {"number": 55, "name": "Ar-Rahman", "name_ar": "الرحمن", "verses": 78, "parts": (27,)},
    {"number": 56, "name": "Al-Waqiah", "name_ar": "الواقعة", "verses": 96, "parts": (27,)},
    {"number": 57, "name": "Al-Hadid", "name_ar": "الحديد", "verses": 29, "parts": (27,)},
    {"number": 58, "name": "Al-Mujadila", "name_ar": "المجادلة", "verses": 22, "parts": (28,)},
    {"number": 59, "name": "Al-Hashr", "name_ar": "الحشر", "verses": 24, "parts": (28,)},
    {"number": 60, "name": "Al-Mumtahanah", "name_ar": "الممتحنة", "verses": 13, "parts": (28,)},
    {"number": 61, "name": "As-Saff", "name_ar": "الصف", "verses": 14, "parts": (28,)},
    {"number": 62, "name": "Al-Jumuah", "name_ar": "الجمعة", "verses": 11, "parts": (28,)},
    {"number": 63, "name": "Al-Munafiqun", "name_ar": "المنافقون", "verses": 11, "parts": (28,)},
    {"number": 64, "name": "At-Taghabun", "name_ar": "التغابن", "verses": 18, "parts": (28,)},
    {"number": 65, "name": "At-Talaq", "name_ar": "الطلاق", "verses": 12, "parts": (28,)},
    {"number": 66, "name": "At-Tahrim", "name_ar": "التحريم", "verses": 12, "parts": (28,)},
    {"number": 67, "name": "Al-Mulk", "name_ar": "الملك", "verses": 30, "parts": (29,)},
    {"number": 68, "name": "Al-Qalam", "name_ar": "القلم", "verses": 52, "parts": (29,)},
    {"number": 69, "name": "Al-Haqqah", "name_ar": "الحاقة", "verses": 52, "parts": (29,)},
    {"number": 70, "name": "Al-Maarij", "name_ar": "المعارج", "verses": 44, "parts": (29,)},
    {"number": 71, "name": "Nuh", "name_ar": "نوح", "verses": 28, "parts": (29,)},
    {"number": 72, "name": "Al-Jinn", "name_ar": "الجن", "verses": 28, "parts": (29,)},
    {"number": 73, "name": "Al-Muzzammil", "name_ar": "المزمل", "verses": 20, "parts": (29,)},
    {"number": 74, "name": "Al-Muddaththir", "name_ar": "المدثر", "verses": 56, "parts": (29,)},
    {"number": 75, "name": "Al-Qiyamah", "name_ar": "القيامة", "verses": 40, "parts": (29,)},
    {"number": 76, "name": "Al-Insan", "name_ar": "الإنسان", "verses": 31, "parts": (29,)},
    {"number": 77, "name": "Al-Mursalat", "name_ar": "المرسلات", "verses": 50, "parts": (29,)},
    {"number": 78, "name": "An-Naba", "name_ar": "النبأ", "verses": 40, "parts": (30,)},
    {"number": 79, "name": "An-Naziat", "name_ar": "النازعات", "verses": 46, "parts": (30,)},
    {"number": 80, "name": "Abasa", "name_ar": "عبس", "verses": 42, "parts": (30,)},
    {"number": 81, "name": "At-Takwir", "name_ar": "التكوير", "verses": 29, "parts": (30,)},
    {"number": 82, "name": "Al-Infitar", "name_ar": "الانفطار", "verses": 19, "parts": (30,)},
    {"number": 83, "name": "Al-Mutaffifin", "name_ar": "المطففين", "verses": 36, "parts": (30,)},
    {"number": 84, "name": "Al-Inshiqaq", "name_ar": "الانشقاق", "verses": 25, "parts": (30,)},
    {"number": 85, "name": "Al-Buruj", "name_ar": "البروج", "verses": 22, "parts": (30,)},
    {"number": 86, "name": "At-Tariq", "name_ar": "الطارق", "verses": 17, "parts": (30,)},
    {"number": 87, "name": "Al-Ala", "name_ar": "الأعلى", "verses": 19, "parts": (30,)},
    {"number": 88, "name": "Al-Ghashiyah", "name_ar": "الغاشية", "verses": 26, "parts": (30,)},
    {"number": 89, "name": "Al-Fajr", "name_ar": "الفجر", "verses": 30, "parts": (30,)},
    {"number": 90, "name": "Al-Balad", "name_ar": "البلد", "verses": 20, "parts": (30,)},
    {"number": 91, "name": "Ash-Shams", "name_ar": "الشمس", "verses": 15, "parts": (30,)},
    {"number": 92, "name": "Al-Layl", "name_ar": "الليل", "verses": 21, "parts": (30,)},
    {"number": 93, "name": "Ad-Duhaa", "name_ar": "الضحى", "verses": 11, "parts": (30,)},
    {"number": 94, "name": "Ash-Sharh", "name_ar": "الشرح", "verses": 8, "parts": (30,)},
    {"number": 95, "name": "At-Tin", "name_ar": "التين", "verses": 8, "parts": (30,)},
    {"number": 96, "name": "Al-Alaq", "name_ar": "العلق", "verses": 19, "parts": (30,)},
    {"number": 97, "name": "Al-Qadr", "name_ar": "القدر", "verses": 5, "parts": (30,)},
    {"number": 98, "name": "Al-Bayyinah", "name_ar": "البينة", "verses": 8, "parts": (30,)},
    {"number": 99, "name": "Az-Zalzalah", "name_ar": "الزلزلة", "verses": 8, "parts": (30,)},
    {"number": 100, "name": "Al-Adiyat", "name_ar": "العاديات", "verses": 11, "parts": (30,)},
    {"number": 101, "name": "Al-Qariah", "name_ar": "القارعة", "verses": 11, "parts": (30,)},
    {"number": 102, "name": "At-Takathur", "name_ar": "التكاثر", "verses": 8, "parts": (30,)},
    {"number": 103, "name": "Al-Asr", "name_ar": "العصر", "verses": 3, "parts": (30,)},
    {"number": 104, "name": "Al-Humazah", "name_ar": "الهمزة", "verses": 9, "parts": (30,)},
    {"number": 105, "name": "Al-Fil", "name_ar": "الفيل", "verses": 5, "parts": (30,)},
    {"number": 106, "name": "Quraysh", "name_ar": "قريش", "verses": 4, "parts": (30,)},
    {"number": 107, "name": "Al-Maun", "name_ar": "الماعون", "verses": 7, "parts": (30,)},
    {"number": 108, "name": "Al-Kawthar", "name_ar": "الكوثر", "verses": 3, "parts": (30,)},
    {"number": 109, "name": "Al-Kafirun", "name_ar": "الكافرون", "verses": 6, "parts": (30,)},
    {"number": 110, "name": "An-Nasr", "name_ar": "النصر", "verses": 3, "parts": (30,)},
    {"number": 111, "name": "Al-Masad", "name_ar": "المسد", "verses": 5, "parts": (30,)},
    {"number": 112, "name": "Al-Ikhlas", "name_ar": "الإخلاص", "verses": 4, "parts": (30,)},
    {"number": 113, "name": "Al-Falaq", "name_ar": "الفلق", "verses": 5, "parts": (30,)},
    {"number": 114, "name": "An-Nas", "name_ar": "الناس", "verses": 6, "parts": (30,)},
]
