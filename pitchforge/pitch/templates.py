"""Jinja2 templates for the eight pitch sections, in document order."""

from typing import Dict, List, Tuple

from jinja2 import Environment, StrictUndefined, Template

# Section key -> heading, in the order sections appear in a pitch
SECTIONS: List[Tuple[str, str]] = [
    ("executive_summary", "Executive Summary"),
    ("problem_statement", "Problem Statement"),
    ("solution_approach", "Solution Approach"),
    ("technical_implementation", "Technical Implementation"),
    ("timeline_and_budget", "Timeline & Budget"),
    ("expected_outcomes", "Expected Outcomes"),
    ("relevant_experience", "Relevant Experience"),
    ("call_to_action", "Call to Action"),
]

INDUSTRY_TITLE_KEYWORDS: Dict[str, List[str]] = {
    "Technology": ["Digital", "Tech", "Software", "Platform"],
    "Healthcare": ["Healthcare", "Medical", "Patient", "Clinical"],
    "Finance": ["Financial", "Banking", "Investment", "Trading"],
    "Retail": ["Retail", "E-commerce", "Commerce", "Shopping"],
    "Manufacturing": ["Manufacturing", "Production", "Industrial", "Factory"],
    "Education": ["Educational", "Learning", "Academic", "Training"],
}
DEFAULT_TITLE_KEYWORDS: List[str] = ["Professional"]

INDUSTRY_TECH_STACK: Dict[str, str] = {
    "Technology": "React, Node.js, PostgreSQL, AWS",
    "Healthcare": "HIPAA-compliant cloud infrastructure, React Native, Node.js",
}
DEFAULT_TECH_STACK = "Modern web technologies, cloud-native architecture, microservices"

_TEMPLATES: Dict[str, str] = {
    "executive_summary": """\
# {{ heading }}

We are excited to present our comprehensive solution for your {{ brief.title }} project. \
Based on our analysis of your requirements and industry best practices, we propose a tailored \
approach that leverages cutting-edge technology and proven methodologies to deliver exceptional \
results within your {{ brief.timeline }} timeline and {{ brief.budget }} budget.

Our solution addresses your core objectives while ensuring scalability, security, and long-term success.
""",

    "problem_statement": """\
# {{ heading }}

Your organization requires a robust solution that addresses the following key challenges:

{% for objective in objectives %}
- {{ objective }}
{% endfor %}

These requirements demand a sophisticated approach that balances technical excellence with practical business needs.
""",

    "solution_approach": """\
# {{ heading }}

{% if lead_study %}
Our solution approach is informed by successful implementations in similar {{ brief.industry }} \
projects, including our work on "{{ lead_study.title }}" which achieved {{ lead_study.outcome }}.
{% else %}
Our solution approach leverages industry best practices and proven methodologies for {{ brief.industry }} projects.
{% endif %}

We will implement a phased approach that ensures:
- **Phase 1**: Requirements analysis and architecture design
- **Phase 2**: Core development and integration
- **Phase 3**: Testing, deployment, and optimization
- **Phase 4**: Training, documentation, and ongoing support
""",

    "technical_implementation": """\
# {{ heading }}

Our technical approach utilizes:
- **Frontend**: Modern, responsive web application
- **Backend**: Scalable, secure API architecture
- **Database**: Robust data management system
- **Infrastructure**: Cloud-native deployment with {{ tech_stack }}
- **Security**: Enterprise-grade security protocols
- **Performance**: Optimized for high availability and scalability
""",

    "timeline_and_budget": """\
# {{ heading }}

**Project Timeline**: {{ brief.timeline }}
- Week 1-2: Discovery and planning
- Week 3-6: Development and testing
- Week 7-8: Deployment and optimization
- Week 9-12: Training and support

**Investment**: {{ brief.budget }}
- Development: 70% of total budget
- Testing and QA: 15% of total budget
- Deployment and training: 10% of total budget
- Ongoing support: 5% of total budget
""",

    "expected_outcomes": """\
# {{ heading }}

{% if lead_study %}
Based on our experience with similar projects, we expect:
{% else %}
Based on industry best practices and our expertise, we expect:
{% endif %}
- Improved efficiency and productivity
- Enhanced user experience and satisfaction
- Reduced operational costs
- Increased scalability and performance
- Measurable ROI within 6-12 months
{% if lead_study %}

Our previous work on "{{ lead_study.title }}" delivered {{ lead_study.outcome }}, \
demonstrating our ability to exceed expectations.
{% endif %}
""",

    "relevant_experience": """\
# {{ heading }}

{% if case_studies %}
Our solution is informed by successful implementations in similar projects:

{% for study in case_studies %}
**{{ study.title }}**
- Industry: {{ study.industry }}
- Outcome: {{ study.outcome }}
- Key Technologies: {{ study.tags | join(", ") }}
{% if not loop.last %}

{% endif %}
{% endfor %}

These experiences provide valuable insights and proven methodologies for your project.
{% else %}
Our team brings extensive experience in similar projects, with proven track records of \
successful implementations and measurable business outcomes.
{% endif %}
""",

    "call_to_action": """\
# {{ heading }}

We're excited to partner with you on this {{ brief.title }} project. To move forward:

1. **Review and Approval**: Please review this proposal and provide feedback
2. **Kickoff Meeting**: Schedule a detailed project kickoff session
3. **Contract Finalization**: Complete contract and payment terms
4. **Project Launch**: Begin development within 1-2 weeks of approval

We're confident that our approach will deliver exceptional results that exceed your expectations. \
Let's discuss how we can bring your vision to life.

**Contact**: Ready to discuss your project in detail
**Timeline**: {{ brief.timeline }} from project approval
**Investment**: {{ brief.budget }} total project cost
""",
}

_environment = Environment(
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
    autoescape=False,
)


def load_section_templates() -> Dict[str, Template]:
    """Compile every section template, keyed by section key."""
    return {key: _environment.from_string(_TEMPLATES[key]) for key, _ in SECTIONS}
