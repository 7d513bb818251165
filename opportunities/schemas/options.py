
# Option lists offered by the submission forms

TUTORING_PROVIDER_TYPES = ["private_tutor", "business"]

TUTORING_CATEGORIES = [
    "Mathematics",
    "English",
    "Social Science",
    "Computer Science & Coding",
    "Science",
    "Humanities",
    "Standardized Tests",
    "Languages",
    "Music & Arts",
    "Counseling",
]

CAMP_CATEGORIES = [
    "STEM",
    "Leadership",
    "Arts & Performance",
    "Mathematics",
    "Language & Cultural Immersion",
    "Pre-Professional",
    "Outdoor & Adventure",
    "Wellness & Personal Development",
]

CAMP_TAGS = [
    "Women Only",
    "Boys Only",
    "Underrepresented Groups",
    "Residential / Overnight",
    "Day Camp",
    "Virtual / Online",
    "Selective Admission",
    "Scholarship Available",
    "University-Hosted",
    "Industry-Hosted",
]

SELECTIVITY_LEVELS = [1, 2, 3, 4]

INTERNSHIP_TYPES = [
    "Academic",
    "STEM",
    "Healthcare",
    "Business & Marketing",
    "Research",
    "Nonprofit & Social Impact",
    "Government",
    "Arts & Media",
    "Law & Policy",
]

INTERNSHIP_COMPENSATION = ["Paid", "Unpaid", "Stipend", "Academic Credit"]

INTERNSHIP_DURATIONS = ["Summer", "Academic Year", "Semester", "Part-time", "Full-time"]

DELIVERY_MODES = ["In-person", "Remote", "Hybrid"]

JOB_CATEGORIES = [
    "Retail & Customer Service",
    "Food & Hospitality",
    "Office / Administrative Support",
    "Education & Tutoring",
    "Tech & IT Support",
    "STEM-related Jobs",
    "Childcare / Camp Jobs",
    "Healthcare Assistant Roles",
    "Creative & Design",
    "Freelance / Gig Work",
    "Government / Civic Jobs",
    "Nonprofit & Community Service",
]

JOB_COMPENSATION = ["Hourly Wage", "Stipend", "Commission-based", "Volunteer / Unpaid"]

JOB_TYPES = ["Full-time", "Part-time", "Temporary"]

SALARY_TYPES = ["hourly", "monthly", "yearly"]
