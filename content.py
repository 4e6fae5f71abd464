# content.py
# Static copy shared by the Dash and Streamlit front ends.

NAV_ITEMS = [
    {"path": "/", "label": "Home"},
    {"path": "/dashboard", "label": "Dashboard"},
    {"path": "/about", "label": "About"},
    {"path": "/contact", "label": "Contact"},
    {"path": "/ppe-enquiries", "label": "PPE Enquiries"},
]

HERO_IMAGE = "https://images.pexels.com/photos/162568/coal-mine-dark-mine-162568.jpeg?auto=compress&cs=tinysrgb&w=1920&h=1080&fit=crop"
ABOUT_IMAGE = "https://images.pexels.com/photos/209831/pexels-photo-209831.jpeg?auto=compress&cs=tinysrgb&w=1600&h=900&fit=crop"

HERO_TITLE = "PPE Management System"
HERO_TAGLINE = "Ensuring Safety Through Innovation and Technology"

HOME_INTRO = (
    "Our integrated platform ensures every worker has access to proper protective equipment "
    "and maintains the highest safety standards in mining operations."
)

FEATURES = [
    {"icon": "🛡️", "title": "PPE Management",
     "description": "Comprehensive tracking and management of personal protective equipment"},
    {"icon": "👷", "title": "Employee Safety",
     "description": "Monitor and ensure compliance across all mining operations"},
    {"icon": "📊", "title": "Real-time Analytics",
     "description": "Data-driven insights for improved safety performance"},
]

ABOUT_INTRO = (
    "Leading the future of mining operations through innovative safety management "
    "and cutting-edge technology solutions."
)

MISSION = (
    "To revolutionize mining safety through comprehensive PPE management systems, "
    "ensuring every worker returns home safely while maintaining operational excellence "
    "and environmental responsibility."
)

VISION = (
    "To be the global leader in mining safety technology, setting new standards "
    "for worker protection and operational efficiency through innovative digital "
    "solutions and data-driven insights."
)

OBJECTIVES = [
    "Implement comprehensive PPE tracking and management system",
    "Monitor real-time compliance across all mining operations",
    "Reduce workplace incidents through proactive safety measures",
    "Streamline PPE procurement and distribution processes",
]

KEY_FEATURES = [
    "Digital employee management dashboard",
    "Automated PPE compliance reporting",
    "Online PPE requisition and tracking system",
    "Advanced analytics and performance insights",
]

VALUES = [
    {"icon": "🛡️", "title": "Safety First",
     "description": "Safety is our top priority in every operation and decision we make."},
    {"icon": "👥", "title": "Team Excellence",
     "description": "Our dedicated professionals ensure the highest standards of performance."},
    {"icon": "⚙️", "title": "Innovation",
     "description": "We leverage cutting-edge technology to improve mining operations."},
    {"icon": "🏅", "title": "Quality Standards",
     "description": "We maintain exceptional quality in all our processes and deliverables."},
]

CONTACT_INTRO = (
    "Get in touch with our team for any inquiries about our mining safety solutions "
    "or PPE management systems."
)

CONTACT_INFO = [
    {"icon": "✉️", "title": "Email Address", "details": "contact@visionmines.com",
     "link": "mailto:contact@visionmines.com"},
    {"icon": "📞", "title": "Phone Number", "details": "+1 (555) 123-MINE",
     "link": "tel:+15551234463"},
    {"icon": "📍", "title": "Head Office",
     "details": "1234 Mining District, Industrial Zone, City State 12345", "link": None},
    {"icon": "🕒", "title": "Business Hours",
     "details": "Monday - Friday: 8:00 AM - 6:00 PM", "link": None},
]

ENQUIRY_INTRO = (
    "Request personal protective equipment for your mining operations. "
    "Complete the form below to submit your PPE requirements."
)

ENQUIRY_SUCCESS = (
    "Your PPE enquiry has been submitted and is now being processed. "
    "You will be notified once it's approved and ready for collection."
)

CONTACT_SUCCESS = "Thank you for contacting us. We'll get back to you within 24 hours."

NO_EMPLOYEES = "No employees found matching your search criteria."
NO_ITEMS = 'No PPE items added yet. Click "Add Item" to get started.'
NO_ENQUIRIES = "No PPE enquiries submitted yet."

WHY_US_TITLE = "Why Choose Vision Mines?"
WHY_US = (
    "With over a decade of experience in mining safety solutions, we provide comprehensive "
    "PPE management systems that ensure compliance, reduce incidents, and protect your most "
    "valuable asset - your workforce. Our innovative approach combines cutting-edge technology "
    "with deep industry expertise to deliver solutions that make a real difference."
)
