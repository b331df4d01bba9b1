COURSE_CATEGORIES = [
    {
        "title": "Paramedical Courses",
        "courses": [
            "D.PHARMA (Ayurved & Homeopath)",
            "G.N.M. (Ayurved)",
            "C.C.H. (Ayurved Community Health)",
            "D.M.L.T. (Diagnostic)",
            "C.M.S & E.D.",
            "G.N.O.",
            "O.T. Technician",
            "Vaithery",
            "B.PHARMA & D.PHARMA (Allopath)",
        ],
    },
    {
        "title": "Medical Courses",
        "courses": ["B.A.M.S.", "B.N.Y.S.", "D.N.Y.S.", "M.S.W.", "M.A.H.W."],
    },
    {
        "title": "Technical Courses",
        "courses": [
            "I.T.I. - Fitter, Welder, Mechanical, Electrician",
            "Material Management",
            "POLYTECHNIC (Civil Engineering All Courses)",
            "N.T.T.",
            "T.O.T.",
            "A.D.F.A.",
        ],
    },
    {
        "title": "Computer Courses",
        "courses": ["CCC", "PGDCA", "O-LEVEL", "DCA", "ADCA", "BCA", "MCA"],
    },
    {
        "title": "Degree Programs",
        "courses": [
            "B.A.",
            "B.Sc.",
            "B.Com.",
            "M.Com.",
            "M.A.",
            "L.L.B.",
            "L.L.M.",
            "BBA",
            "MBA",
            "B.T.C.",
            "B.Ed.",
            "D.Ed.",
            "B.P.Ed.",
            "M.P.Ed.",
            "B.Tech",
            "M.Tech",
        ],
    },
    {
        "title": "Yoga & Wellness",
        "courses": [
            "YOGA D.N.Y.S.",
            "YOGA B.N.Y.S.",
            "YOGA P.G. Diploma",
            "YOGA B.Sc.",
            "YOGA M.Sc.",
            "M.A. YOGA",
            "B.A. YOGA",
            "Yoga Teacher Training Certificate",
        ],
    },
]

ALL_FILTER_VALUE = "All"


def all_courses():
    """Every catalogue course once, sorted."""
    seen = set()
    for category in COURSE_CATEGORIES:
        seen.update(category["courses"])
    return sorted(seen)


COURSE_CHOICES = [(c, c) for c in all_courses()]

# Filter dropdowns lead with an "All" option that disables the filter.
COURSE_FILTER_OPTIONS = [(ALL_FILTER_VALUE, "All Courses")] + COURSE_CHOICES
