"""
Smart Claim Assistant - Streamlit App.
Multi-tab wizard for uploading documents, completing claim details,
estimating payouts, drafting the claim e-mail and chatting with the assistant.
"""

from typing import Any

import pandas as pd
import streamlit as st

from claim_assistant import (
    ClaimAssistant,
    ClaimRecord,
    ClaimType,
    ClassificationResult,
    EmailDraftError,
    UploadedFile,
    ValidationReport,
    ValidationReportFormatter,
    get_settings,
)
from claim_assistant.core.vocabulary import FIELD_LABELS, required_documents_for
from claim_assistant.services.letters import generate_claim_description
from claim_assistant.services.mailer import EmailDraft
from claim_assistant.utils.logging import setup_logging


# =============================================================================
# Page Configuration
# =============================================================================
st.set_page_config(
    page_title="Smart Claim Assistant",
    page_icon="🛡️",
    layout="wide",
    initial_sidebar_state="expanded",
)

settings = get_settings()
setup_logging(settings.log_level, log_file=settings.log_file)


# =============================================================================
# Helper Functions
# =============================================================================
@st.cache_resource
def get_assistant() -> ClaimAssistant:
    """Shared assistant; components hold no per-user state."""
    return ClaimAssistant(settings)


def to_uploaded_file(uploaded: Any) -> UploadedFile:
    """Convert a Streamlit upload into an UploadedFile."""
    return UploadedFile(
        filename=uploaded.name,
        mime_type=uploaded.type or "",
        size_bytes=uploaded.size,
        content=uploaded.getvalue(),
    )


def requirements_table(report: ValidationReport) -> pd.DataFrame:
    """Required items with their current status."""
    rows = [
        {
            "Item": FIELD_LABELS[f],
            "Kind": "Field",
            "Status": "✅" if f in report.completed_required_fields else "❌",
        }
        for f in report.completed_required_fields + report.missing_required_fields
    ]
    for document in required_documents_for(report.claim_type):
        rows.append(
            {
                "Item": document.value,
                "Kind": "Document",
                "Status": "✅" if document in report.provided_required_documents else "❌",
            }
        )
    return pd.DataFrame(rows)


CLAIM_TYPE_OPTIONS = [""] + [c.value for c in ClaimType]


def widget_key(field_name: str) -> str:
    return f"claim_{field_name}"


def init_session_state() -> None:
    assistant = get_assistant()
    defaults: dict[str, Any] = {
        "claim_record": ClaimRecord(),
        "classification": ClassificationResult(),
        "estimate": None,
        "description": "",
        "email_draft": None,
        "chat": assistant.new_chat(),
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value
    for field_name in FIELD_LABELS:
        st.session_state.setdefault(widget_key(field_name), "")


def sync_record_from_widgets(record: ClaimRecord) -> None:
    """Copy form widget values into the claim record before validating."""
    for field_name in FIELD_LABELS:
        setattr(record, field_name, st.session_state[widget_key(field_name)])


init_session_state()
assistant = get_assistant()
record: ClaimRecord = st.session_state.claim_record
sync_record_from_widgets(record)
classification: ClassificationResult = st.session_state.classification
report = assistant.validate(record, classification.labels_text)


# =============================================================================
# Sidebar
# =============================================================================
with st.sidebar:
    st.title("Claim Completion")
    formatter = ValidationReportFormatter(report)
    st.progress(report.completeness_percent / 100)
    st.metric("Overall Progress", f"{report.completeness_percent}%")

    if report.ready_for_submission:
        st.success(formatter.STATUS_MESSAGES[report.status])
    elif report.missing_required_fields:
        st.warning(
            "Missing Required Information: "
            + ", ".join(formatter.field_label(f) for f in report.missing_required_fields)
        )
    if report.missing_required_documents:
        st.error(
            "Missing Required Documents: "
            + ", ".join(d.value for d in report.missing_required_documents)
        )
    if report.provided_required_documents:
        st.caption(
            "✅ Documents Provided: "
            + ", ".join(d.value for d in report.provided_required_documents)
        )

    st.markdown("---")
    st.download_button(
        "📄 Export Status (JSON)",
        data=assistant.validate_with_formatter(record, classification.labels_text).to_json(),
        file_name="claim-status.json",
        mime="application/json",
        use_container_width=True,
    )


# =============================================================================
# Main Content
# =============================================================================
st.title("🛡️ Smart Claim Assistant")
st.caption("Upload documents, complete your claim, and send it to your insurer")

upload_tab, details_tab, estimate_tab, email_tab, chat_tab = st.tabs(
    ["📁 Upload Documents", "📝 Claim Details", "🧮 AI Estimate", "✉️ Send Email", "💬 Chat Assistant"]
)

# =============================================================================
# Upload Tab
# =============================================================================
with upload_tab:
    st.subheader("Upload Claim Documents")
    uploads = st.file_uploader(
        "Upload your insurance claim documents (PDF, PNG, JPG, JPEG)",
        type=["pdf", "png", "jpg", "jpeg"],
        accept_multiple_files=True,
    )

    if st.button("Process Documents", type="primary", disabled=not uploads):
        with st.spinner("Processing documents..."):
            files = [to_uploaded_file(u) for u in uploads]
            st.session_state.classification = assistant.process_documents(files)
        st.success("Documents processed successfully!")
        st.rerun()

    if classification.extracted_text:
        st.markdown("#### Extracted Text")
        st.text_area("Extracted Text", classification.extracted_text, height=200, disabled=True)

    if classification.labels:
        st.markdown("#### Document Classification")
        st.write(" ".join(f"`{label.value}`" for label in classification.labels))

    if classification.image_features:
        with st.expander("Image Details", expanded=False):
            st.dataframe(
                pd.DataFrame([f.model_dump() for f in classification.image_features.values()]),
                use_container_width=True,
                hide_index=True,
            )

# =============================================================================
# Claim Details Tab
# =============================================================================
with details_tab:
    st.subheader("Claim Details")

    col1, col2 = st.columns(2)
    with col1:
        st.selectbox(
            "Claim Type *",
            CLAIM_TYPE_OPTIONS,
            key=widget_key("claim_type"),
            format_func=lambda v: v or "Select claim type",
        )
        st.text_input("Policy Number *", key=widget_key("policy_number"))
        st.text_input("Incident Date *", key=widget_key("incident_date"), placeholder="YYYY-MM-DD")
        st.text_input("Location", key=widget_key("location"))
    with col2:
        st.text_input("Email *", key=widget_key("contact_email"))
        st.text_input("Phone", key=widget_key("contact_phone"))
        st.text_input("Estimated Amount (₹)", key=widget_key("estimated_expenses"))
        st.text_input("Address", key=widget_key("address"))

    st.text_area("Description *", key=widget_key("user_description"), height=150)

    if record.claim_type is not None:
        st.info(
            "Required documents: "
            + ", ".join(d.value for d in required_documents_for(record.claim_type))
        )

    if st.button("✨ Generate Claim Letter"):
        st.session_state.description = generate_claim_description(record)
        st.success("Claim description generated!")

    if st.session_state.description:
        st.text_area("Generated Claim Letter", st.session_state.description, height=300)

    with st.expander("📋 Requirement Checklist", expanded=False):
        st.dataframe(requirements_table(report), use_container_width=True, hide_index=True)

# =============================================================================
# Estimate Tab
# =============================================================================
with estimate_tab:
    st.subheader("Claim Amount Estimator")
    can_estimate = assistant.estimator.can_estimate(record, classification.extracted_text)

    if st.button("Generate AI Estimate", type="primary", disabled=not can_estimate):
        st.session_state.estimate = assistant.estimate(record, classification.extracted_text)
        st.success("Estimate generated successfully!")

    if not can_estimate:
        st.caption(
            "Please select a claim type and provide an estimated amount to generate an AI estimate."
        )

    estimate = st.session_state.estimate
    if estimate is not None:
        col1, col2 = st.columns(2)
        col1.metric("Your Estimate", f"₹{int(estimate.claimed_amount):,}")
        col2.metric("Estimated Payout", estimate.formatted_amount)
        st.text_area("Estimated Payout Analysis", estimate.details, height=220, disabled=True)
        st.caption(
            "*This is an AI-generated estimate. Actual payout may vary based on policy terms "
            "and claim verification."
        )

# =============================================================================
# Email Tab
# =============================================================================
with email_tab:
    st.subheader("Send Claim Letter via Email")
    composer = assistant.email_composer
    if st.session_state.email_draft is None:
        draft = composer.new_draft(record, st.session_state.description)
        st.session_state.email_draft = draft
        st.session_state.email_to = draft.to
        st.session_state.email_subject = draft.subject
        st.session_state.email_message = draft.message

    st.text_input("To", key="email_to", placeholder="claims@insurancecompany.com")
    st.text_input("Subject", key="email_subject")
    if st.button("Generate Template"):
        st.session_state.email_message = composer.generate_template(
            record, st.session_state.description
        )
        st.success("Email template generated!")
    st.text_area("Message", key="email_message", height=300)

    draft = EmailDraft(
        to=st.session_state.email_to,
        subject=st.session_state.email_subject,
        message=st.session_state.email_message,
    )
    st.session_state.email_draft = draft

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Open Email Client", disabled=not (draft.to and draft.message)):
            try:
                link = composer.build_mailto_link(draft)
            except EmailDraftError as e:
                st.error(str(e))
            else:
                st.link_button("📧 Open in mail app", link)
    with col2:
        st.download_button(
            "Download",
            data=composer.as_text(draft),
            file_name=composer.download_filename(record),
            mime="text/plain",
        )

# =============================================================================
# Chat Tab
# =============================================================================
with chat_tab:
    st.subheader("Insurance Assistant Chat")
    st.caption("Ask questions about your claim, insurance processes, or get guidance")
    chat = st.session_state.chat

    for message in chat.messages:
        with st.chat_message(message.role):
            st.markdown(message.content)
            st.caption(message.timestamp.strftime("%H:%M"))

    prompt = st.chat_input("Ask a question about your claim...")
    if prompt:
        with st.spinner("Thinking..."):
            chat.send(prompt, record)
        st.rerun()
