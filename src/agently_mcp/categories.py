
"""Closed list of catalog categories accepted by the `categories` filter."""

CATEGORIES = (
    "Accounting",
    "Activism",
    "Acting",
    "Adventure",
    "Agriculture",
    "Animals",
    "Anthropology",
    "Archaeology",
    "Architecture",
    "Art",
    "Astronomy",
    "Auditing",
    "Automotive",
    "Automation",
    "Aviation",
    "Biology",
    "Bookkeeping",
    "Botany",
    "Broadcasting",
    "Business",
    "Cartography",
    "Ceremonies",
    "Childcare",
    "Coaching and Teaching",
    "Communication",
    "Community",
    "Competition",
    "Compliance",
    "Conservation",
    "Construction",
    "Consulting",
    "Content Creation",
    "Copywriting",
    "Counseling and Therapy",
    "Crafts",
    "Crowdsourcing",
    "Cryptocurrency",
    "Cybersecurity",
    "Dance",
    "Data Analysis",
    "Data Handling",
    "Debating",
    "Demolition",
    "Design",
    "Disaster Response and Recovery",
    "Editing",
    "Education",
    "Emergency Services",
    "Engineering",
    "Entrepreneurship",
    "Environmental Protection",
    "Esports",
    "Event Management",
    "Exploration",
    "Fact Checking",
    "Family and Care",
    "Fashion and Beauty",
    "Film",
    "Finance",
    "Fitness",
    "Food and Nutrition",
    "Forensics",
    "Fun",
    "Gaming",
    "Gardening",
    "Geography",
    "Geology",
    "Graphic Design",
    "Grooming",
    "Gym",
    "Healthcare",
    "History",
    "Hospitality",
    "Human Resources",
    "Humor",
    "Information Technology",
    "Innovation",
    "Insurance",
    "Interior Design",
    "International Relations",
    "Inventory Management",
    "Investing",
    "IT Support",
    "Journalism",
    "Language Learning",
    "Law Enforcement",
    "Lead Generation",
    "Leadership",
    "Literature and Poetry",
    "Logistics",
    "Maintenance",
    "Manufacturing",
    "Marketing",
    "Math",
    "Mental Health",
    "Military",
    "Mining",
    "Music",
    "Navigation",
    "Negotiation",
    "Network Management",
    "Observation",
    "Parenting",
    "Personal Assistant",
    "Philosophy",
    "Photography",
    "Physical Exercise",
    "Physics",
    "Planning",
    "Policy Analysis",
    "Politics",
    "Problem Solving",
    "Procurement and Sourcing",
    "Product Management",
    "Project Management",
    "Public Health",
    "Public Relations",
    "Publishing",
    "Quality Assurance",
    "Quantum Computing",
    "Real Estate",
    "Recruiting",
    "Recycling",
    "Religion",
    "Reporting",
    "Research",
    "Retail",
    "Risk Management",
    "Robotics",
    "Sales",
    "Sanitation",
    "Science",
    "Security",
    "Senior Care",
    "Service Industry",
    "Social Media",
    "Social Work",
    "Software",
    "Software Engineering",
    "Sound Design",
    "Space",
    "Sports",
    "Strategy",
    "Sustainability",
    "Supply Chain",
    "Support and Service Industry",
    "Teaching",
    "Technology",
    "Therapy",
    "Training and Tutoring",
    "Translation",
    "Transportation",
    "Tutoring",
    "UI Design",
    "Utilities",
    "UX Design",
    "Vehicle Operation",
    "Video Production",
    "Virtual Worlds",
    "Voice",
    "Volunteer",
    "Wellness and Fitness",
    "Waste Management",
    "Writing and Storytelling",
    "Travel",
    "Urban Planning",
    "Energy",
    "Telecommunications",
    "Ethics",
    "Government",
    "Pets",
)

CATEGORY_SET = frozenset(CATEGORIES)
